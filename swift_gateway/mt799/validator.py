"""
Structural validation of a raw MT799 envelope.

Only the relative order of the top-level markers is checked. Brace balance,
nesting and block lengths are left to the extractors, so malformed content
inside a block passes here and fails later.

Two policies exist:

- ORDERING: all four markers present, first occurrences strictly increasing
- PATTERN: a single dot-all regex finds {1: ... {2: ... {4: ... {5: ... }

ORDERING is the default. They disagree on input where a marker token
appears early inside another block (PATTERN can still find a later, ordered
occurrence; ORDERING only looks at the first one).
"""

import logging
from enum import Enum

from .constants import BLOCK_ORDER, ENVELOPE_PATTERN
from .errors import StructuralError

logger = logging.getLogger(__name__)


class ValidationPolicy(str, Enum):
    ORDERING = "ordering"
    PATTERN = "pattern"


def _is_ordered(raw: str) -> bool:
    positions = [raw.find(block.marker) for block in BLOCK_ORDER]
    if any(pos == -1 for pos in positions):
        return False
    return all(a < b for a, b in zip(positions, positions[1:]))


def _matches_pattern(raw: str) -> bool:
    return ENVELOPE_PATTERN.search(raw) is not None


def is_well_formed(raw: str, policy: ValidationPolicy = ValidationPolicy.ORDERING) -> bool:
    """Return True if the raw message is acceptable for segmentation."""
    if not raw:
        return False

    if policy == ValidationPolicy.PATTERN:
        return _matches_pattern(raw)
    return _is_ordered(raw)


def require_well_formed(raw: str, policy: ValidationPolicy = ValidationPolicy.ORDERING) -> None:
    """Raise StructuralError unless is_well_formed() accepts the message."""
    if not is_well_formed(raw, policy):
        logger.warning(f"Rejected message: block markers missing or out of order (policy={policy.value})")
        raise StructuralError("Invalid SWIFT MT799 message format.")
