"""Postal address entity owned by a user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from makemeacube.domain.shared.identity import StorageIdentity

if TYPE_CHECKING:
    from makemeacube.domain.user.aggregates.user import User


class Address(StorageIdentity):
    """A postal address. Its four fields only ever change together."""

    def __init__(  # NOQA: PLR0913
        self,
        address: str,
        city: str,
        country: str,
        postal_code: str,
        owner: User,
        id: Optional[int] = None,
    ):
        self._id = id
        self._address = address
        self._city = city
        self._country = country
        self._postal_code = postal_code
        self._owner = owner

    @property
    def address(self) -> str:
        return self._address

    @property
    def city(self) -> str:
        return self._city

    @property
    def country(self) -> str:
        return self._country

    @property
    def postal_code(self) -> str:
        return self._postal_code

    @property
    def owner(self) -> User:
        return self._owner

    @property
    def owner_id(self) -> Optional[int]:
        return self._owner.id

    def relocate(
        self,
        address: str,
        city: str,
        country: str,
        postal_code: str,
    ) -> None:
        self._address = address
        self._city = city
        self._country = country
        self._postal_code = postal_code

    def attach_to(self, owner: User) -> None:
        self._owner = owner

    def __repr__(self) -> str:
        return (
            f"Address(id={self._id}, city={self._city!r}, "
            f"owner_id={self.owner_id})"
        )
