"""SQLAlchemy implementation of AddressRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from makemeacube.domain.user import (
    Address,
    AddressNotFoundError,
    AddressRepository,
    UserNotFoundError,
)
from makemeacube.infrastructure.persistence.sqlalchemy.models import (
    AddressModel,
    UserModel,
)
from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user._mapping import (  # NOQA: E501
    new_address_model,
    update_address_model,
)
from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
    find_user_model,
)

logger = logging.getLogger(__name__)


class AddressRepositorySQLAlchemy(AddressRepository):
    """Addresses are stored through their owner's ``addresses`` collection."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._users = UserRepositorySQLAlchemy(session)

    async def find_by_id(self, address_id: int) -> Optional[Address]:
        stmt = select(AddressModel.user_id).where(AddressModel.id == address_id)
        user_id = (await self._session.execute(stmt)).scalar_one_or_none()
        if user_id is None:
            return None

        user = await self._users.find_by_id(user_id)
        if user is None:
            return None
        return user.find_address(address_id)

    async def save(self, address: Address) -> Address:
        user_model = await self._owner_model(address)

        model = self._find_in(user_model, address.id)
        if model is None:
            model = new_address_model(address)
            user_model.addresses.append(model)
        else:
            update_address_model(model, address)

        await self._session.flush()
        if not address.is_persisted:
            address.assign_id(model.id)
        logger.debug("Saved address %s of user %s", model.id, user_model.id)
        return address

    async def delete(self, address: Address) -> None:
        user_model = await self._owner_model(address)

        model = self._find_in(user_model, address.id)
        if model is None:
            raise AddressNotFoundError(address.id)

        user_model.addresses.remove(model)
        await self._session.flush()
        logger.info("Deleted address %s of user %s", address.id, user_model.id)

    async def _owner_model(self, address: Address) -> UserModel:
        user_model = await find_user_model(self._session, address.owner_id)
        if user_model is None:
            raise UserNotFoundError(address.owner_id)
        return user_model

    @staticmethod
    def _find_in(user_model: UserModel, address_id: Optional[int]):
        if address_id is None:
            return None
        for model in user_model.addresses:
            if model.id == address_id:
                return model
        return None
