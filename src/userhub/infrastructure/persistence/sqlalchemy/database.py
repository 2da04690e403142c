"""Engine, session factory and schema management.

The migration runner is ``Base.metadata.create_all``: it only creates what
is missing and never alters or drops existing tables.
"""

import logging
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Import models to register with Base.metadata
import userhub.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from userhub.infrastructure.persistence.sqlalchemy.models.base import Base
from userhub_config.settings import Settings

logger = logging.getLogger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the shared async engine for the configured database.

    Parameters
    ----------
    settings
        Application settings providing the URL and driver options

    Returns
    -------
    AsyncEngine managing the connection pool
    """
    url = settings.database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        if db_path:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        url,
        echo=settings.debug and settings.log_level.upper() == "DEBUG",
        pool_pre_ping=True,  # Verify connections before use
        connect_args=settings.database_connect_args,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")


async def ping(engine: AsyncEngine) -> bool:
    """Return True if the database answers a trivial query."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database ping failed")
        return False
    return True


def display_url(url: str) -> str:
    """Strip credentials from a database URL for display."""
    return url.split("@")[-1] if "@" in url else url
