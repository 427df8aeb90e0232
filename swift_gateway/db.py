"""
Database connection management.

Async SQLAlchemy engine and session factory. The gateway defaults to SQLite
through aiosqlite; any async URL (e.g. postgresql+asyncpg) works because the
schema is declared with SQLAlchemy Core.
"""

import logging
from typing import AsyncGenerator, Optional

from sqlalchemy import Column, Integer, MetaData, String, Table, Text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .config import settings

logger = logging.getLogger(__name__)

metadata = MetaData()

# One row per accepted MT799 upload
messages_table = Table(
    "messages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # Basic Header Block
    Column("type_of_message", String(1)),
    Column("service_level", String(2)),
    Column("bic", String(12)),
    Column("session_number", String(4)),
    Column("sequence_number", String(6)),
    # Application Header Block
    Column("message_direction", String(1)),
    Column("message_type", String(3)),
    Column("receiver_bic", String(12)),
    Column("sender_bic", String(11)),
    Column("app_header_session_number", String(4)),
    Column("app_header_sequence_number", String(6)),
    Column("message_priority", String(1)),
    # Text Block
    Column("transaction_ref", Text),
    Column("related_ref", Text),
    Column("message_text", Text),
    # Trailer Block
    Column("checksum", Text),
    Column("digital_signature", Text),
    # ISO 8601, UTC
    Column("created_at", String(40), nullable=False),
)


class Database:
    """Owns the engine for the lifetime of the application."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    async def connect(self):
        """Create the engine and make sure the schema exists."""
        self.engine = create_async_engine(self.url, echo=self.echo)
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)
        logger.info(f"Database connected: {self.engine.url.render_as_string(hide_password=True)}")

    async def disconnect(self):
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Database disconnected")
        self.engine = None
        self.session_factory = None

    @property
    def is_connected(self) -> bool:
        return self.session_factory is not None


database = Database(settings.database_url, echo=settings.database_echo)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one session per request."""
    if not database.is_connected:
        raise RuntimeError("Database is not connected")
    async with database.session_factory() as session:
        yield session
