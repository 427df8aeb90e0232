"""
MT799 Constants

Block markers, fixed-width header layouts and text-block tags used by the
MT799 parsing modules.

Reference: SWIFT FIN message structure, blocks 1, 2, 4 and 5
"""

import re
from enum import Enum


# =============================================================================
# Blocks and Markers
# =============================================================================

class Block(str, Enum):
    """Top-level blocks of a FIN envelope (block 3 is not supported)."""

    BASIC_HEADER = "1"
    APPLICATION_HEADER = "2"
    TEXT = "4"
    TRAILER = "5"

    @property
    def marker(self) -> str:
        return "{" + self.value + ":"

    @property
    def display_name(self) -> str:
        return BLOCK_DISPLAY_NAMES[self]


BLOCK_DISPLAY_NAMES = {
    Block.BASIC_HEADER: "Basic Header Block",
    Block.APPLICATION_HEADER: "Application Header Block",
    Block.TEXT: "Text Block",
    Block.TRAILER: "Trailer Block",
}

# Envelope order
BLOCK_ORDER = (Block.BASIC_HEADER, Block.APPLICATION_HEADER, Block.TEXT, Block.TRAILER)

BASIC_HEADER_MARKER = Block.BASIC_HEADER.marker        # "{1:"
APPLICATION_HEADER_MARKER = Block.APPLICATION_HEADER.marker  # "{2:"
TEXT_BLOCK_MARKER = Block.TEXT.marker                  # "{4:"
TRAILER_MARKER = Block.TRAILER.marker                  # "{5:"

MARKER_LENGTH = 3
BLOCK_CLOSE = "}"
TEXT_BLOCK_TERMINATOR = "-}"

# Shortest span the outer strip can work on: marker + closing brace
MIN_SPAN_LENGTH = MARKER_LENGTH + len(BLOCK_CLOSE)


# =============================================================================
# Fixed-width Header Layouts (field name, offset, width)
# =============================================================================

# {1:F01PRCBBGSFAXXX1111111111}
BASIC_HEADER_LAYOUT = (
    ("message_type_code", 0, 1),   # "F"
    ("service_level", 1, 2),       # "01"
    ("sender_bic", 3, 12),         # "PRCBBGSFAXXX"
    ("session_number", 15, 4),     # "1111"
    ("sequence_number", 19, 6),    # "111111"
)
BASIC_HEADER_LENGTH = 25

# {2:O7991111111111ABGRSWACAXXX11111111111111111111N}
APPLICATION_HEADER_LAYOUT = (
    ("direction", 0, 1),           # "O"
    ("message_type", 1, 3),        # "799"
    ("receiver_bic", 4, 12),
    ("sender_bic", 16, 11),
    ("session_number", 27, 4),
    ("sequence_number", 31, 6),
    ("priority", 37, 1),           # "N"
)
APPLICATION_HEADER_MIN_LENGTH = 38


# =============================================================================
# Text Block (block 4)
# =============================================================================

TAG_TRANSACTION_REF = "20"
TAG_RELATED_REF = "21"
TAG_NARRATIVE = "79"

# Only these open a new field; other :NN: lines are continuation text
RECOGNIZED_TAGS = (TAG_TRANSACTION_REF, TAG_RELATED_REF, TAG_NARRATIVE)
TAG_PREFIX_LENGTH = 4  # ":20:"


# =============================================================================
# Trailer Block (block 5)
# =============================================================================

TRAILER_MAC_MARKER = "{MAC:"
TRAILER_CHK_MARKER = "{CHK:"


# =============================================================================
# Validation Patterns
# =============================================================================

ENVELOPE_PATTERN = re.compile(r"\{1:.*?\{2:.*?\{4:.*?\{5:.*?\}", re.DOTALL)
