"""SQLAlchemy repository factory for one request."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user import (
    AddressRepositorySQLAlchemy,
    MakerToolRepositorySQLAlchemy,
    MaterialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from makemeacube.application.ports.identity import Principal


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    All repositories share one session, so a command sees its own writes
    and the caller commits or rolls back once for the whole request.
    """

    def __init__(self, session: AsyncSession, current_user: Principal):
        self._session = session
        self._current_user = current_user

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._address_repo: AddressRepositorySQLAlchemy | None = None
        self._tool_repo: MakerToolRepositorySQLAlchemy | None = None
        self._material_repo: MaterialRepositorySQLAlchemy | None = None

    @property
    def current_user(self) -> Principal:
        return self._current_user

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def address_repository(self) -> AddressRepositorySQLAlchemy:
        if self._address_repo is None:
            self._address_repo = AddressRepositorySQLAlchemy(self._session)
        return self._address_repo

    def maker_tool_repository(self) -> MakerToolRepositorySQLAlchemy:
        if self._tool_repo is None:
            self._tool_repo = MakerToolRepositorySQLAlchemy(self._session)
        return self._tool_repo

    def material_repository(self) -> MaterialRepositorySQLAlchemy:
        if self._material_repo is None:
            self._material_repo = MaterialRepositorySQLAlchemy(self._session)
        return self._material_repo
