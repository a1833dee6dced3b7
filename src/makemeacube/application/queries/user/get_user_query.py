"""Query to get the caller's user aggregate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from makemeacube.application.services import IdentityResolver
from makemeacube.domain.user import User
from makemeacube.domain.user.services import OwnershipValidator

if TYPE_CHECKING:
    from makemeacube.application.factories import RepositoryFactory
    from makemeacube.application.ports.identity import Principal


class GetUserQuery:
    def __init__(
        self,
        ownership_validator: OwnershipValidator,
        current_user: Principal,
    ) -> None:
        self._validator = ownership_validator
        self._caller_id = IdentityResolver.resolve(current_user)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserQuery:
        return cls(
            ownership_validator=OwnershipValidator.from_factory(factory),
            current_user=factory.current_user,
        )

    async def execute(self, user_id: int) -> User:
        return await self._validator.user(self._caller_id, user_id)
