"""
Fixed-width field extraction for blocks 1 and 2.

Both headers are sliced at fixed offsets after stripping the "{N:" marker
and the closing "}". Content is returned verbatim; no character-class or
BIC validation is done.
"""

from .constants import (
    APPLICATION_HEADER_LAYOUT,
    APPLICATION_HEADER_MIN_LENGTH,
    BASIC_HEADER_LAYOUT,
    BASIC_HEADER_LENGTH,
    MARKER_LENGTH,
    MIN_SPAN_LENGTH,
    Block,
)
from .errors import FormatError, FormatErrorReason
from .models import ApplicationHeaderFields, BasicHeaderFields


def strip_block(span: str, block: Block) -> str:
    """Drop the 3-character marker and the trailing brace."""
    if len(span) < MIN_SPAN_LENGTH:
        raise FormatError(
            FormatErrorReason.INSUFFICIENT_LENGTH,
            block,
            detail=f"block is {len(span)} characters, need at least {MIN_SPAN_LENGTH}",
        )
    return span[MARKER_LENGTH:-1]


def _slice_layout(content: str, layout, required: int, block: Block) -> dict:
    if len(content) < required:
        raise FormatError(
            FormatErrorReason.INSUFFICIENT_LENGTH,
            block,
            detail=f"content is {len(content)} characters, need {required}",
        )
    return {name: content[offset:offset + width] for name, offset, width in layout}


def extract_basic_header(span: str) -> BasicHeaderFields:
    """
    Extract block 1 fields.

    {1:F01PRCBBGSFAXXX1111111111} -> F / 01 / PRCBBGSFAXXX / 1111 / 111111
    """
    content = strip_block(span, Block.BASIC_HEADER)
    values = _slice_layout(content, BASIC_HEADER_LAYOUT, BASIC_HEADER_LENGTH, Block.BASIC_HEADER)
    return BasicHeaderFields(**values)


def extract_application_header(span: str) -> ApplicationHeaderFields:
    """
    Extract block 2 fields.

    Layout: direction(1) type(3) receiver BIC(12) sender BIC(11)
    session(4) sequence(6) priority(1). Extra trailing content is ignored.
    """
    content = strip_block(span, Block.APPLICATION_HEADER)
    values = _slice_layout(
        content, APPLICATION_HEADER_LAYOUT, APPLICATION_HEADER_MIN_LENGTH, Block.APPLICATION_HEADER
    )
    return ApplicationHeaderFields(**values)
