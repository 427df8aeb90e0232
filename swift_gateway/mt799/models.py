"""
MT799 data model.

Plain dataclasses shared by the parsing modules. The API layer converts
MessageRecord into its pydantic response schema.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from .constants import BLOCK_ORDER, Block


@dataclass(frozen=True)
class BlockSet:
    """Raw block spans, markers included; "" when a block is absent."""

    basic_header: str = ""
    application_header: str = ""
    text_block: str = ""
    trailer: str = ""

    def span(self, block: Block) -> str:
        return {
            Block.BASIC_HEADER: self.basic_header,
            Block.APPLICATION_HEADER: self.application_header,
            Block.TEXT: self.text_block,
            Block.TRAILER: self.trailer,
        }[block]

    def missing(self) -> List[Block]:
        """Blocks with an empty span, in envelope order."""
        return [block for block in BLOCK_ORDER if not self.span(block)]


@dataclass(frozen=True)
class BasicHeaderFields:
    message_type_code: str
    service_level: str
    sender_bic: str
    session_number: str
    sequence_number: str


@dataclass(frozen=True)
class ApplicationHeaderFields:
    direction: str
    message_type: str
    receiver_bic: str
    sender_bic: str
    session_number: str
    sequence_number: str
    priority: str


@dataclass
class TextFields:
    """Text block tags in first-seen order."""

    fields: Dict[str, str] = field(default_factory=dict)

    def get(self, tag: str) -> Optional[str]:
        return self.fields.get(tag)

    def tags(self) -> List[str]:
        return list(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


@dataclass(frozen=True)
class TrailerFields:
    checksum: str = ""
    digital_signature: str = ""


@dataclass(frozen=True)
class MessageRecord:
    """Flattened MT799 message, the unit handed to the message store."""

    # Basic Header Block
    type_of_message: str
    service_level: str
    bic: str
    session_number: str
    sequence_number: str

    # Application Header Block
    message_direction: str
    message_type: str
    receiver_bic: str
    sender_bic: str
    app_header_session_number: str
    app_header_sequence_number: str
    message_priority: str

    # Text Block
    transaction_ref: Optional[str]
    related_ref: Optional[str]
    message_text: Optional[str]

    # Trailer Block
    checksum: str
    digital_signature: str

    timestamp: datetime
    message_id: Optional[int] = None

    def fields(self) -> dict:
        """Parsed content only, without store id and timestamp."""
        data = asdict(self)
        data.pop("message_id")
        data.pop("timestamp")
        return data
