"""Database initialization utilities."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with Base.metadata
import makemeacube.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from makemeacube.infrastructure.persistence.sqlalchemy.database import get_engine
from makemeacube.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    engine = engine or get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date")


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """Drop all database tables (USE WITH CAUTION!)."""
    engine = engine or get_engine()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")


async def reset_tables(engine: AsyncEngine | None = None) -> None:
    """Drop and recreate every table."""
    await drop_tables(engine)
    await create_tables(engine)
