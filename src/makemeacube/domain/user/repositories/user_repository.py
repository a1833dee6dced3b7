"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from makemeacube.domain.user.aggregates.user import User
from makemeacube.domain.user.value_objects import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Loads and saves the whole aggregate: scalar fields together with the
    address, maker tool and material collections.
    """

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update the aggregate, assigning missing identifiers."""

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Delete a user and everything it owns."""
