"""
MT799 Message Parsing Package

Pure, synchronous parsing of SWIFT MT799 free-format messages.

Structure:
- constants.py: Block markers, header layouts and recognized tags
- errors.py: StructuralError / FormatError taxonomy
- models.py: Block spans, per-block fields and the flat MessageRecord
- validator.py: Marker order check (ordering / pattern policies)
- segmenter.py: Block splitting (lookahead / line-scan policies)
- headers.py: Fixed-width extraction for blocks 1 and 2
- text_block.py: Tag and continuation-line parser for block 4
- trailer.py: {MAC:} / {CHK:} extraction for block 5
- assembler.py: MessageRecord composition
- parser.py: Full pipeline
"""

from .constants import (
    Block,
    BLOCK_ORDER,
    RECOGNIZED_TAGS,
    BASIC_HEADER_LENGTH,
    APPLICATION_HEADER_MIN_LENGTH,
)
from .errors import (
    Mt799Error,
    StructuralError,
    FormatError,
    FormatErrorReason,
)
from .models import (
    BlockSet,
    BasicHeaderFields,
    ApplicationHeaderFields,
    TextFields,
    TrailerFields,
    MessageRecord,
)
from .validator import ValidationPolicy, is_well_formed, require_well_formed
from .segmenter import SegmentationPolicy, segment
from .headers import extract_basic_header, extract_application_header
from .text_block import parse_text_block
from .trailer import extract_trailer
from .assembler import assemble
from .parser import ParseResult, parse, parse_message

__all__ = [
    # Constants
    "Block",
    "BLOCK_ORDER",
    "RECOGNIZED_TAGS",
    "BASIC_HEADER_LENGTH",
    "APPLICATION_HEADER_MIN_LENGTH",
    # Errors
    "Mt799Error",
    "StructuralError",
    "FormatError",
    "FormatErrorReason",
    # Models
    "BlockSet",
    "BasicHeaderFields",
    "ApplicationHeaderFields",
    "TextFields",
    "TrailerFields",
    "MessageRecord",
    # Operations
    "ValidationPolicy",
    "is_well_formed",
    "require_well_formed",
    "SegmentationPolicy",
    "segment",
    "extract_basic_header",
    "extract_application_header",
    "parse_text_block",
    "extract_trailer",
    "assemble",
    "ParseResult",
    "parse",
    "parse_message",
]
