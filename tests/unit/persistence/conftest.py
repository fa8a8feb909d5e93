"""
Pytest fixtures for adapter tests on in-memory SQLite.

Every test gets a fresh database with two seeded users.
"""

import pytest

from authbridge.persistence.sqlalchemy import SQLAlchemyAdapter

# Re-export shared database fixtures
from tests.shared.fixtures.database import async_engine, db_session

__all__ = [
    "async_engine",
    "db_session",
]


@pytest.fixture
def adapter(db_session) -> SQLAlchemyAdapter:
    """Adapter on the test session using the default error factory."""
    return SQLAlchemyAdapter(db_session)
