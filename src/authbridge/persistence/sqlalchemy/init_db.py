"""Database engine and schema utilities."""

import asyncio
import logging
import sys

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

# Import models to register with AuthBase.metadata
import authbridge.persistence.sqlalchemy.models  # noqa: F401
from authbridge.logging_config import configure_logging
from authbridge.persistence.sqlalchemy.base import AuthBase
from authbridge_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings | None = None) -> AsyncEngine:
    """Create the async engine described by ``settings``.

    SQLite connections get foreign key enforcement switched on, otherwise
    sessions and keys could reference users that do not exist.
    """
    settings = settings or get_settings()
    kwargs = {}

    if settings.is_sqlite and ":memory:" in settings.database_url:
        # One shared connection, or every checkout sees an empty database
        kwargs["poolclass"] = StaticPool
    elif not settings.is_sqlite:
        kwargs["pool_pre_ping"] = True

    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        **kwargs,
    )

    if settings.is_sqlite and settings.sqlite_foreign_keys:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    return engine


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create the users, user_keys and user_sessions tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    """
    owns_engine = engine is None
    engine = engine or build_engine()
    logger.info("Ensuring auth tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(AuthBase.metadata.create_all)

    if owns_engine:
        await engine.dispose()
    logger.info("Auth schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop the auth tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    owns_engine = engine is None
    engine = engine or build_engine()
    logger.warning("Dropping all auth tables...")

    async with engine.begin() as conn:
        await conn.run_sync(AuthBase.metadata.drop_all)

    if owns_engine:
        await engine.dispose()
    logger.info("Auth tables dropped successfully")


def _display_url(database_url: str) -> str:
    return database_url.split("@")[-1] if "@" in database_url else database_url


async def _reset_database(force: bool = False) -> None:
    """Drop all tables and recreate them (USE WITH CAUTION!)."""
    settings = get_settings()
    print(f"Database: {_display_url(settings.database_url)}")
    print()

    if not force:
        print("WARNING: This will DELETE ALL users, keys and sessions!")
        print()
        response = input("Type 'yes' to confirm: ")
        if response.lower() != "yes":
            print("Aborted.")
            sys.exit(1)
        print()

    await drop_tables()
    await create_tables()
    logger.info("Database recreated successfully!")


def db_init() -> None:
    """Initialize database (create tables)."""
    configure_logging()
    logger.info("Database: %s", _display_url(get_settings().database_url))
    asyncio.run(create_tables())


def db_reset() -> None:
    """Drop and recreate all auth tables."""
    configure_logging()
    force = "--force" in sys.argv or "-f" in sys.argv
    asyncio.run(_reset_database(force=force))
