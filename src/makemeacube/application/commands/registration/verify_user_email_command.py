"""Mark a pending user as verified once the out-of-band check succeeded."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from makemeacube.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from makemeacube.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class VerifyUserEmailCommand:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> VerifyUserEmailCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: int) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if user.is_verified:
            return user

        user.verify_email()
        await self._user_repo.save(user)
        logger.info("Verified email of user %s", user_id)
        return user
