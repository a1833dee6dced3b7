"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from makemeacube.domain.user.repositories import (
    AddressRepository,
    MakerToolRepository,
    MaterialRepository,
    UserRepository,
)

if TYPE_CHECKING:
    from makemeacube.application.ports.identity import Principal


class RepositoryFactory(Protocol):
    """Protocol for creating the repositories of one request."""

    @property
    def current_user(self) -> Principal:
        """Get the authenticated caller of the request."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Commit or roll back at the request boundary.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def address_repository(self) -> AddressRepository:
        """Get address repository."""
        ...

    def maker_tool_repository(self) -> MakerToolRepository:
        """Get maker tool repository."""
        ...

    def material_repository(self) -> MaterialRepository:
        """Get material repository."""
        ...
