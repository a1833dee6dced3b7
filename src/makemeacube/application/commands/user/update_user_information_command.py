"""Update a user's profile fields."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from makemeacube.application.dtos.user import UserUpdatedInformationDTO
from makemeacube.application.services import AggregateMergeService, IdentityResolver
from makemeacube.domain.user import MakerAddressRequiredError, User, UserRepository
from makemeacube.domain.user.services import OwnershipValidator

if TYPE_CHECKING:
    from makemeacube.application.factories import RepositoryFactory
    from makemeacube.application.ports.identity import Principal

logger = logging.getLogger(__name__)


class UpdateUserInformationCommand:
    """Replace the caller's profile; email and provider stay untouched."""

    def __init__(
        self,
        user_repository: UserRepository,
        ownership_validator: OwnershipValidator,
        current_user: Principal,
    ):
        self._user_repo = user_repository
        self._validator = ownership_validator
        self._caller_id = IdentityResolver.resolve(current_user)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateUserInformationCommand:
        return cls(
            user_repository=factory.user_repository(),
            ownership_validator=OwnershipValidator.from_factory(factory),
            current_user=factory.current_user,
        )

    async def execute(self, user_id: int, info: UserUpdatedInformationDTO) -> User:
        user = await self._validator.user(self._caller_id, user_id)

        if info.is_maker and not user.addresses:
            raise MakerAddressRequiredError(user_id)

        updated = AggregateMergeService.merge_user_update(user, info)
        await self._user_repo.save(updated)

        logger.debug(
            "Updated information of user %s (maker: %s -> %s)",
            user_id,
            user.is_maker,
            updated.is_maker,
        )
        return updated
