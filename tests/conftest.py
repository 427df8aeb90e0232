"""
Pytest configuration and fixtures for MT799 Gateway tests.
"""

import os
import pytest
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

# Set test environment before the app reads its settings
os.environ.setdefault("MT799_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("MT799_LOG_LEVEL", "DEBUG")


# =============================================================================
# Sample Messages
# =============================================================================

BASIC_HEADER_CONTENT = "F01PRCBBGSFAXXX1234567890"               # 25 chars
APPLICATION_HEADER_CONTENT = "O799PRCBBGSFAXXXGRSWACAXXXX2222333333N"  # 38 chars

BASIC_HEADER = "{1:" + BASIC_HEADER_CONTENT + "}"
APPLICATION_HEADER = "{2:" + APPLICATION_HEADER_CONTENT + "}"
TEXT_BLOCK = (
    "{4:\n"
    ":20:67-C111111-KNTRL\n"
    ":21:30-111-1111111\n"
    ":79:NA VNIMANIETO NA: OTDEL BANKOVI GARANTSII\n"
    ".\n"
    "OTNOSNO: POTVARJDENIE NA AVTENTICHNOST\n"
    "-}"
)
TRAILER = "{5:{MAC:ABCDEF12}{CHK:3916EF336FF7}}"

NARRATIVE = (
    "NA VNIMANIETO NA: OTDEL BANKOVI GARANTSII\n"
    ".\n"
    "OTNOSNO: POTVARJDENIE NA AVTENTICHNOST"
)


@pytest.fixture
def sample_mt799() -> str:
    """Well-formed MT799 with the four blocks back to back."""
    return BASIC_HEADER + APPLICATION_HEADER + TEXT_BLOCK + TRAILER


@pytest.fixture
def sample_blocks() -> dict:
    return {
        "basic_header": BASIC_HEADER,
        "application_header": APPLICATION_HEADER,
        "text_block": TEXT_BLOCK,
        "trailer": TRAILER,
    }


@pytest.fixture
def expected_fields() -> dict:
    """MessageRecord.fields() for sample_mt799."""
    return {
        "type_of_message": "F",
        "service_level": "01",
        "bic": "PRCBBGSFAXXX",
        "session_number": "1234",
        "sequence_number": "567890",
        "message_direction": "O",
        "message_type": "799",
        "receiver_bic": "PRCBBGSFAXXX",
        "sender_bic": "GRSWACAXXXX",
        "app_header_session_number": "2222",
        "app_header_sequence_number": "333333",
        "message_priority": "N",
        "transaction_ref": "67-C111111-KNTRL",
        "related_ref": "30-111-1111111",
        "message_text": NARRATIVE,
        "checksum": "3916EF336FF7",
        "digital_signature": "ABCDEF12",
    }


@pytest.fixture
def sample_mt799_multiline() -> str:
    """Same message with each block on its own line and a trailing newline."""
    return "\n".join([BASIC_HEADER, APPLICATION_HEADER, TEXT_BLOCK, TRAILER]) + "\n"


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
async def async_client() -> AsyncGenerator:
    """Async test client (lifespan is not run; tests override get_db)."""
    from httpx import AsyncClient, ASGITransport
    from swift_gateway.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def mock_db_session() -> AsyncMock:
    """AsyncSession stand-in."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    return session


@pytest.fixture
def mock_db_result():
    """Factory for query results returned by mock_db_session.execute."""
    def _make(scalar=None, rows=None):
        result = MagicMock()
        result.scalar_one.return_value = scalar
        result.fetchall.return_value = rows or []
        return result
    return _make


@pytest.fixture
def override_get_db(mock_db_session: AsyncMock):
    """Dependency override yielding the mock session."""
    async def _override():
        yield mock_db_session
    return _override


@pytest.fixture
async def sqlite_database(tmp_path):
    """A connected Database backed by a temporary SQLite file."""
    from swift_gateway.db import Database

    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'messages.db'}")
    await database.connect()
    try:
        yield database
    finally:
        await database.disconnect()


@pytest.fixture
async def sqlite_session(sqlite_database):
    async with sqlite_database.session_factory() as session:
        yield session
