"""
MT799 parsing pipeline.

raw text -> validate -> segment -> extract (x4) -> assemble

Nothing here touches storage; the API layer persists the returned record
only after every step has succeeded.
"""

import logging
from dataclasses import dataclass

from .assembler import assemble
from .errors import StructuralError
from .headers import extract_application_header, extract_basic_header
from .models import BlockSet, MessageRecord, TextFields
from .segmenter import SegmentationPolicy, segment
from .text_block import parse_text_block
from .trailer import extract_trailer
from .validator import ValidationPolicy, require_well_formed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    record: MessageRecord
    blocks: BlockSet
    text: TextFields


def parse(
    raw: str,
    validation_policy: ValidationPolicy = ValidationPolicy.ORDERING,
    segmentation_policy: SegmentationPolicy = SegmentationPolicy.LOOKAHEAD,
) -> ParseResult:
    """Run the full pipeline and keep the intermediate blocks and tags."""
    require_well_formed(raw, validation_policy)

    blocks = segment(raw, segmentation_policy)
    missing = blocks.missing()
    if missing:
        block = missing[0]
        logger.warning(f"{block.display_name} is missing or invalid.")
        raise StructuralError(f"{block.display_name} is missing or invalid.", block=block)

    basic = extract_basic_header(blocks.basic_header)
    application = extract_application_header(blocks.application_header)
    text = parse_text_block(blocks.text_block)
    trailer = extract_trailer(blocks.trailer)

    if not len(text):
        logger.info("Text block has no :20:, :21: or :79: field")

    record = assemble(basic, application, text, trailer)
    logger.info(
        f"Parsed MT{record.message_type} {record.message_direction} "
        f"from {record.sender_bic} to {record.receiver_bic} (ref={record.transaction_ref})"
    )
    return ParseResult(record=record, blocks=blocks, text=text)


def parse_message(
    raw: str,
    validation_policy: ValidationPolicy = ValidationPolicy.ORDERING,
    segmentation_policy: SegmentationPolicy = SegmentationPolicy.LOOKAHEAD,
) -> MessageRecord:
    """Parse a raw MT799 message into a MessageRecord."""
    return parse(raw, validation_policy, segmentation_policy).record
