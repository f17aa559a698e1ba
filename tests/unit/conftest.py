"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from snipshare.backend.core.config_schema import ShareTokenSchema, SnippetsSchema
from snipshare.backend.models.snippet import Snippet


# =============================================================================
# Database Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Usage:
        def test_repository(mock_db_session: AsyncMock):
            repo = SnippetRepository(mock_db_session)
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.execute = AsyncMock()
    session.add = MagicMock()
    session.delete = AsyncMock()
    return session


# =============================================================================
# Snippet Fixtures
# =============================================================================


@pytest.fixture
def snippets_config() -> SnippetsSchema:
    """Snippet rules matching config/settings/snippets.yaml."""
    return SnippetsSchema(
        share_token=ShareTokenSchema(length=8, max_attempts=3),
    )


def make_snippet(**overrides: Any) -> Snippet:
    """Build a transient Snippet with sensible defaults."""
    now = datetime(2024, 1, 1, 12, 0, 0)
    values: dict[str, Any] = {
        "id": "snippet-123",
        "title": "hello.py",
        "content": "print(1)",
        "language": "python",
        "owner_id": "alice",
        "is_public": True,
        "share_token": "abcd1234",
        "created_at": now,
        "updated_at": now,
    }
    values.update(overrides)
    return Snippet(**values)


@pytest.fixture
def snippet_factory():
    """Factory for transient snippets; keyword arguments override defaults."""
    return make_snippet


@pytest.fixture
def sample_snippet() -> Snippet:
    """A snippet owned by 'alice'."""
    return make_snippet()
