"""
Trailer block (block 5) sub-field extraction.

    {5:{MAC:ABCDEF}{CHK:123456}}

MAC and CHK are looked up independently; a missing sub-field is an empty
string. Values are not verified.
"""

from .constants import (
    BLOCK_CLOSE,
    TRAILER_CHK_MARKER,
    TRAILER_MAC_MARKER,
    Block,
)
from .errors import FormatError, FormatErrorReason
from .headers import strip_block
from .models import TrailerFields


def find_subfield(content: str, marker: str) -> str:
    """
    Return the value between `marker` and the next closing brace.

    Returns "" when the marker is absent. Raises FormatError
    (UnterminatedSubfield) when the marker has no closing brace.
    """
    start = content.find(marker)
    if start == -1:
        return ""

    value_start = start + len(marker)
    end = content.find(BLOCK_CLOSE, value_start)
    if end == -1:
        raise FormatError(FormatErrorReason.UNTERMINATED_SUBFIELD, Block.TRAILER, detail=marker)
    return content[value_start:end]


def extract_trailer(span: str) -> TrailerFields:
    content = strip_block(span, Block.TRAILER).strip()
    return TrailerFields(
        checksum=find_subfield(content, TRAILER_CHK_MARKER),
        digital_signature=find_subfield(content, TRAILER_MAC_MARKER),
    )
