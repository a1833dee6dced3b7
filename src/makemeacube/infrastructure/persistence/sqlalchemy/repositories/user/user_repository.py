"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional, Union

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from makemeacube.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from makemeacube.infrastructure.persistence.sqlalchemy.models import UserModel
from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user._mapping import (  # NOQA: E501
    IdentityAssignments,
    new_user_model,
    update_user_model,
    user_to_domain,
)

logger = logging.getLogger(__name__)


async def find_user_model(
    session: AsyncSession,
    user_id: Optional[int],
) -> Optional[UserModel]:
    """Load a user row with its addresses, tools and materials."""
    if user_id is None:
        return None
    stmt = select(UserModel).where(UserModel.id == user_id)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> Optional[User]:
        model = await find_user_model(self._session, user_id)
        if model is None:
            return None
        return user_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        stmt = select(UserModel.id).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> User:
        ids = IdentityAssignments()
        existing = await find_user_model(self._session, user.id)

        try:
            if existing is not None:
                update_user_model(existing, user, ids)
                await self._session.flush()
                logger.debug("Updated user: %s", user.id)
            else:
                model = new_user_model(user, ids)
                ids.track(user, model)
                self._session.add(model)
                await self._session.flush()
                logger.info("Created user: %s (email: %s)", model.id, user.email)
        except IntegrityError as e:
            # Unique constraint on email
            if "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

        ids.apply()
        return user

    async def delete(self, user_id: int) -> None:
        model = await find_user_model(self._session, user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", user_id)
