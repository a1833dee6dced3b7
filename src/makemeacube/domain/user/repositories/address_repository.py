"""Address repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from makemeacube.domain.user.entities import Address


class AddressRepository(ABC):
    @abstractmethod
    async def find_by_id(self, address_id: int) -> Optional[Address]:
        """Find an address; its owner is the fully loaded User aggregate."""

    @abstractmethod
    async def save(self, address: Address) -> Address:
        """Insert or update one address under its owner."""

    @abstractmethod
    async def delete(self, address: Address) -> None:
        """Delete one address."""
