"""
Message persistence.

Stores parsed MessageRecords in the `messages` table. Only the API layer
uses this; the parsing package never touches the database.
"""

import logging
from dataclasses import replace
from datetime import datetime

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from ..db import get_db
from ..mt799 import MessageRecord

logger = logging.getLogger(__name__)

_COLUMNS = (
    "type_of_message", "service_level", "bic", "session_number", "sequence_number",
    "message_direction", "message_type", "receiver_bic", "sender_bic",
    "app_header_session_number", "app_header_sequence_number", "message_priority",
    "transaction_ref", "related_ref", "message_text",
    "checksum", "digital_signature",
)


class MessageStore:
    """store() / load_all() over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def store(self, record: MessageRecord) -> MessageRecord:
        """Insert the record and return a copy carrying its new id."""
        query = text(f"""
            INSERT INTO messages ({", ".join(_COLUMNS)}, created_at)
            VALUES ({", ".join(f":{c}" for c in _COLUMNS)}, :created_at)
            RETURNING id
        """)

        params = record.fields()
        params["created_at"] = record.timestamp.isoformat()

        result = await self.db.execute(query, params)
        message_id = result.scalar_one()
        await self.db.commit()

        logger.info(f"Stored message {message_id} (ref={record.transaction_ref})")
        return replace(record, message_id=message_id)

    async def load_all(self) -> list[MessageRecord]:
        """All stored messages in insertion (primary key) order."""
        query = text(f"""
            SELECT id, {", ".join(_COLUMNS)}, created_at
            FROM messages
            ORDER BY id
        """)

        result = await self.db.execute(query)
        rows = result.fetchall()

        records = []
        for row in rows:
            data = row._mapping
            records.append(MessageRecord(
                message_id=data["id"],
                timestamp=datetime.fromisoformat(data["created_at"]),
                **{column: data[column] for column in _COLUMNS},
            ))
        return records


def get_message_store(db: AsyncSession = Depends(get_db)) -> MessageStore:
    return MessageStore(db)
