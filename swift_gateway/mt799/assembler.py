"""
Message assembly.

Copies the four parsed field groups into one flat MessageRecord. No
validation happens here: callers must reject missing blocks first.
"""

from datetime import datetime, timezone
from typing import Optional

from .constants import TAG_NARRATIVE, TAG_RELATED_REF, TAG_TRANSACTION_REF
from .models import (
    ApplicationHeaderFields,
    BasicHeaderFields,
    MessageRecord,
    TextFields,
    TrailerFields,
)


def assemble(
    basic: BasicHeaderFields,
    application: ApplicationHeaderFields,
    text: TextFields,
    trailer: TrailerFields,
    timestamp: Optional[datetime] = None,
) -> MessageRecord:
    return MessageRecord(
        # Basic Header Block
        type_of_message=basic.message_type_code,
        service_level=basic.service_level,
        bic=basic.sender_bic,
        session_number=basic.session_number,
        sequence_number=basic.sequence_number,
        # Application Header Block
        message_direction=application.direction,
        message_type=application.message_type,
        receiver_bic=application.receiver_bic,
        sender_bic=application.sender_bic,
        app_header_session_number=application.session_number,
        app_header_sequence_number=application.sequence_number,
        message_priority=application.priority,
        # Text Block
        transaction_ref=text.get(TAG_TRANSACTION_REF),
        related_ref=text.get(TAG_RELATED_REF),
        message_text=text.get(TAG_NARRATIVE),
        # Trailer Block
        checksum=trailer.checksum,
        digital_signature=trailer.digital_signature,
        timestamp=timestamp or datetime.now(timezone.utc),
    )
