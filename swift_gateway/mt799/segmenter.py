"""
Block segmentation for MT799 envelopes.

Splits a raw message into the four top-level block spans. Spans keep their
markers ("{1:" ... "}") so the extractors can strip them at fixed offsets.

Policies:

- LOOKAHEAD (default): each block runs from its marker to the next block's
  marker or end of input. Headers must close with "}" right before the next
  marker; whitespace between blocks is allowed. The text block does not need
  a closing brace. The trailer runs to the last "}" of the input.
- LINE_SCAN: a line starting with a marker opens that block. The text block
  takes every following line until one starts with "{5:"; all other blocks
  are exactly one line.

Known limitation: no brace balancing is done. A marker token inside free
text (e.g. "{5:" in a narrative line) splits the blocks at that point.
"""

import io
import logging
import re
from enum import Enum

from .constants import (
    APPLICATION_HEADER_MARKER,
    BASIC_HEADER_MARKER,
    TEXT_BLOCK_MARKER,
    TRAILER_MARKER,
)
from .models import BlockSet

logger = logging.getLogger(__name__)


class SegmentationPolicy(str, Enum):
    LOOKAHEAD = "lookahead"
    LINE_SCAN = "line_scan"


# =============================================================================
# Lookahead Patterns
# =============================================================================

_BASIC_HEADER_RE = re.compile(r"\{1:.*?\}(?=\s*\{2:|\s*\Z)", re.DOTALL)
_APPLICATION_HEADER_RE = re.compile(r"\{2:.*?\}(?=\s*\{4:|\s*\Z)", re.DOTALL)
_TEXT_BLOCK_RE = re.compile(r"\{4:.*?(?=\s*\{5:|\s*\Z)", re.DOTALL)
_TRAILER_RE = re.compile(r"\{5:.*\}(?=\s*\Z)", re.DOTALL)


def _first_match(pattern: re.Pattern, raw: str) -> str:
    match = pattern.search(raw)
    return match.group(0) if match else ""


def _segment_lookahead(raw: str) -> BlockSet:
    return BlockSet(
        basic_header=_first_match(_BASIC_HEADER_RE, raw),
        application_header=_first_match(_APPLICATION_HEADER_RE, raw),
        text_block=_first_match(_TEXT_BLOCK_RE, raw),
        trailer=_first_match(_TRAILER_RE, raw),
    )


def _segment_line_scan(raw: str) -> BlockSet:
    # Universal newlines: "\r\n" and "\r" both end a line
    lines = [line.rstrip("\n") for line in io.StringIO(raw, newline=None)]

    basic_header = application_header = text_block = trailer = ""

    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith(BASIC_HEADER_MARKER):
            basic_header = line
        elif line.startswith(APPLICATION_HEADER_MARKER):
            application_header = line
        elif line.startswith(TEXT_BLOCK_MARKER):
            collected = [line]
            i += 1
            while i < len(lines) and not lines[i].startswith(TRAILER_MARKER):
                collected.append(lines[i])
                i += 1
            text_block = "".join(f"{part}\n" for part in collected)
            # The line that stopped the scan is examined on the next pass
            continue
        elif line.startswith(TRAILER_MARKER):
            trailer = line
        i += 1

    return BlockSet(
        basic_header=basic_header,
        application_header=application_header,
        text_block=text_block,
        trailer=trailer,
    )


def segment(raw: str, policy: SegmentationPolicy = SegmentationPolicy.LOOKAHEAD) -> BlockSet:
    """Split a raw message into its four block spans."""
    if policy == SegmentationPolicy.LINE_SCAN:
        blocks = _segment_line_scan(raw)
    else:
        blocks = _segment_lookahead(raw)

    missing = blocks.missing()
    if missing:
        logger.debug(f"Segmentation ({policy.value}) left blocks empty: {[b.value for b in missing]}")
    return blocks
