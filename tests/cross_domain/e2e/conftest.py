"""Fixtures for end-to-end workflow tests."""

from contextlib import asynccontextmanager
from unittest.mock import Mock

import pytest

from makemeacube.application.ports.identity import Principal
from makemeacube.application.ports.notification import VerificationNotifier
from makemeacube.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    session_maker,
)


@pytest.fixture
def notifier():
    return Mock(spec=VerificationNotifier)


@pytest.fixture
def request_scope(session_maker):
    """Open one "request": a session, a factory for the caller, one commit."""

    @asynccontextmanager
    async def _scope(user_id=None, email="anonymous@example.com"):
        async with session_maker() as session:
            factory = SQLAlchemyRepositoryFactory(
                session=session,
                current_user=Principal(user_id=user_id, email=email),
            )
            try:
                yield factory
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return _scope
