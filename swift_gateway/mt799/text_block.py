"""
Text block (block 4) tag parser.

    {4:
    :20:67-C111111-KNTRL
    :21:30-111-1111111
    :79:NA VNIMANIETO NA: OTDEL BANKOVI GARANTSII
    .
    POZDRAVI,
    TARGOVSKO FINANSIRANE
    -}

Only :20:, :21: and :79: open a field. Every other line, including blank
lines and other :NN: prefixes, continues the open field.
"""

from .constants import (
    BLOCK_CLOSE,
    MARKER_LENGTH,
    RECOGNIZED_TAGS,
    TAG_PREFIX_LENGTH,
    TEXT_BLOCK_TERMINATOR,
)
from .models import TextFields

_TAG_PREFIXES = {f":{tag}:": tag for tag in RECOGNIZED_TAGS}


def _strip_text_block(span: str) -> str:
    content = span[MARKER_LENGTH:].rstrip()
    if content.endswith(TEXT_BLOCK_TERMINATOR):
        content = content[:-len(TEXT_BLOCK_TERMINATOR)]
    elif content.endswith(BLOCK_CLOSE):
        content = content[:-len(BLOCK_CLOSE)]
    return content.strip()


def parse_text_block(span: str) -> TextFields:
    """Split block 4 into tag -> value, folding continuation lines."""
    fields = {}
    current_tag = None

    for line in _strip_text_block(span).split("\n"):
        tag = _TAG_PREFIXES.get(line[:TAG_PREFIX_LENGTH])
        if tag is not None:
            current_tag = tag
            fields[current_tag] = line[TAG_PREFIX_LENGTH:].strip()
        elif current_tag is not None:
            fields[current_tag] += "\n" + line.strip()
        # Lines before the first tag are dropped

    return TextFields(fields=fields)
