"""
MT799 parsing errors.

Every failure is terminal for the message being processed and names the
block it happened in, so the API layer can tell the sender what to fix.
"""

from enum import Enum
from typing import Optional

from .constants import Block


class FormatErrorReason(str, Enum):
    INSUFFICIENT_LENGTH = "InsufficientLength"
    UNTERMINATED_SUBFIELD = "UnterminatedSubfield"


class Mt799Error(Exception):
    """Base class for rejected MT799 input."""

    def __init__(self, message: str, block: Optional[Block] = None):
        super().__init__(message)
        self.message = message
        self.block = block


class StructuralError(Mt799Error):
    """Top-level markers are missing, out of order, or a block did not segment."""


class FormatError(Mt799Error):
    """A block's content does not fit its wire layout."""

    def __init__(
        self,
        reason: FormatErrorReason,
        block: Block,
        detail: Optional[str] = None,
    ):
        message = f"{block.display_name}: {reason.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, block=block)
        self.reason = reason
        self.detail = detail
