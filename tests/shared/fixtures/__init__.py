"""Shared pytest fixtures for all test suites."""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    pg_session,
    postgres_container,
    postgres_engine,
)
from tests.shared.fixtures.factories import TestRecordFactory

__all__ = [
    "async_engine",
    "db_session",
    "pg_session",
    "postgres_container",
    "postgres_engine",
    "TestRecordFactory",
]
