"""
Pytest configuration for integration tests.

Integration tests use Testcontainers for an ephemeral PostgreSQL instance.
Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    pg_session,
    postgres_container,
    postgres_engine,
)

__all__ = [
    "pg_session",
    "postgres_container",
    "postgres_engine",
]
