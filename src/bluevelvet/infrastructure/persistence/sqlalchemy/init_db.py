"""Database initialization utilities."""

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from bluevelvet.application.commands.catalog import SeedCategoriesCommand
# Importing the models package registers every table with Base.metadata
from bluevelvet.infrastructure.persistence.sqlalchemy.models import Base
from bluevelvet.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from bluevelvet_config.settings import get_settings

logger = logging.getLogger(__name__)


def ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores REFERENCES clauses unless the pragma is set per connection.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # NOQA: ARG001
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """Create an async engine for the configured (or given) database."""
    url = database_url or get_settings().database_url
    ensure_sqlite_directory(url)
    engine = create_async_engine(url, echo=False, pool_pre_ping=True)
    enable_sqlite_foreign_keys(engine)
    return engine


def display_url(database_url: str) -> str:
    """Strip credentials from a database URL for printing."""
    return database_url.split("@")[-1] if "@" in database_url else database_url


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    owned = engine is None
    engine = engine or create_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if owned:
        await engine.dispose()
    logger.info("Database schema is up to date")


async def drop_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    owned = engine is None
    engine = engine or create_engine()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    if owned:
        await engine.dispose()
    logger.info("Database tables dropped successfully")


async def seed_categories(engine: Optional[AsyncEngine] = None) -> int:
    """Insert the initial categories if the catalog is empty."""
    owned = engine is None
    engine = engine or create_engine()
    session_maker = async_sessionmaker(engine, expire_on_commit=False)

    try:
        async with session_maker() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            inserted = await SeedCategoriesCommand.from_factory(factory).execute()
            await session.commit()
    finally:
        if owned:
            await engine.dispose()

    return inserted
