"""
Unit Test Fixtures.

Fixtures for unit tests - external dependencies are mocked.
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from notekeeper.core.storage import StorageGateway
from notekeeper.models.note import Note


# =============================================================================
# Storage Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """Mocked AsyncSession with the methods the gateway uses."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
def mock_gateway() -> MagicMock:
    """
    Mocked StorageGateway.

    Usage:
        def test_repository(mock_gateway):
            mock_gateway.fetch_one.return_value = make_note()
            repo = NoteRepository(mock_gateway)
    """
    gateway = MagicMock(spec=StorageGateway)
    gateway.fetch_all = AsyncMock(return_value=[])
    gateway.fetch_one = AsyncMock()
    gateway.execute = AsyncMock(return_value=1)
    return gateway


# =============================================================================
# Model Factories
# =============================================================================


def build_note(**overrides) -> Note:
    """Build a Note as it looks after being read back from storage."""
    values = {
        "id": "3f2b8c1e-6a4d-4e7b-9c2a-1d5e8f0a7b3c",
        "title": "Groceries",
        "content": "Milk, eggs",
        "category": "home",
        "published": 0,
        "created_at": datetime(2024, 5, 1, 9, 30, 0),
        "updated_at": datetime(2024, 5, 1, 9, 30, 0),
    }
    values.update(overrides)
    return Note(**values)


@pytest.fixture
def make_note():
    """Provide the Note factory to tests."""
    return build_note
