"""
Pydantic Schemas for the MT799 Gateway API

Request and response models for the message endpoints. Field names are
snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..mt799 import BlockSet, MessageRecord


# =============================================================================
# 1. Base & Common Models
# =============================================================================

class ErrorDetail(BaseModel):
    """Rejection details for a message that failed to parse."""
    code: str                    # StructuralError / InsufficientLength / UnterminatedSubfield
    message: str
    block: Optional[str] = None  # Block number ("1", "2", "4", "5")


# =============================================================================
# 2. Message Records
# =============================================================================

class MessageResponse(BaseModel):
    """Stored MT799 message."""
    model_config = ConfigDict(populate_by_name=True)

    message_id: Optional[int] = Field(None, alias="messageId")

    # Basic Header Block
    type_of_message: str = Field(alias="typeOfMessage")
    service_level: str = Field(alias="serviceLevel")
    bic: str = Field(alias="bic")
    session_number: str = Field(alias="sessionNumber")
    sequence_number: str = Field(alias="sequenceNumber")

    # Application Header Block
    message_direction: str = Field(alias="messageDirection")
    message_type: str = Field(alias="messageType")
    receiver_bic: str = Field(alias="receiverBic")
    sender_bic: str = Field(alias="senderBic")
    app_header_session_number: str = Field(alias="appHeaderSessionNumber")
    app_header_sequence_number: str = Field(alias="appHeaderSequenceNumber")
    message_priority: str = Field(alias="messagePriority")

    # Text Block
    transaction_ref: Optional[str] = Field(None, alias="transactionRef")
    related_ref: Optional[str] = Field(None, alias="relatedRef")
    message_text: Optional[str] = Field(None, alias="messageText")

    # Trailer Block
    checksum: str
    digital_signature: str = Field(alias="digitalSignature")

    timestamp: datetime

    @classmethod
    def from_record(cls, record: MessageRecord) -> "MessageResponse":
        return cls(message_id=record.message_id, timestamp=record.timestamp, **record.fields())


class UploadResponse(BaseModel):
    """Response from POST /api/message/upload."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    message_id: Optional[int] = Field(None, alias="messageId")


# =============================================================================
# 3. Parse Preview
# =============================================================================

class BlockSpans(BaseModel):
    """Raw block spans as segmented, markers included."""
    model_config = ConfigDict(populate_by_name=True)

    basic_header: str = Field(alias="basicHeader")
    application_header: str = Field(alias="applicationHeader")
    text_block: str = Field(alias="textBlock")
    trailer: str

    @classmethod
    def from_blocks(cls, blocks: BlockSet) -> "BlockSpans":
        return cls(
            basic_header=blocks.basic_header,
            application_header=blocks.application_header,
            text_block=blocks.text_block,
            trailer=blocks.trailer,
        )


class ParseResponse(BaseModel):
    """Response from POST /api/message/parse (nothing is stored)."""
    model_config = ConfigDict(populate_by_name=True)

    record: MessageResponse
    blocks: BlockSpans
    text_tags: list[str] = Field(alias="textTags")
