"""Fixtures for SQLAlchemy repository tests."""

from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    db_session,
    session_maker,
)
