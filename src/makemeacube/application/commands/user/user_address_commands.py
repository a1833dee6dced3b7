"""Add, update or delete the caller's addresses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from makemeacube.application.dtos.user import AddressInformationDTO
from makemeacube.application.services import AggregateMergeService, IdentityResolver
from makemeacube.domain.user import (
    AddressRepository,
    MakerAddressRequiredError,
    User,
)
from makemeacube.domain.user.services import OwnershipValidator

if TYPE_CHECKING:
    from makemeacube.application.factories import RepositoryFactory
    from makemeacube.application.ports.identity import Principal

logger = logging.getLogger(__name__)


class AddUserAddressCommand:
    def __init__(
        self,
        address_repository: AddressRepository,
        ownership_validator: OwnershipValidator,
        current_user: Principal,
    ):
        self._address_repo = address_repository
        self._validator = ownership_validator
        self._caller_id = IdentityResolver.resolve(current_user)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddUserAddressCommand:
        return cls(
            address_repository=factory.address_repository(),
            ownership_validator=OwnershipValidator.from_factory(factory),
            current_user=factory.current_user,
        )

    async def execute(self, user_id: int, info: AddressInformationDTO) -> User:
        user = await self._validator.user(self._caller_id, user_id)

        address = AggregateMergeService.merge_address_create(user, info)
        await self._address_repo.save(address)
        user.add_address(address)

        logger.info("Added address %s to user %s", address.id, user_id)
        return user


class UpdateUserAddressCommand:
    """Overwrite all four fields of one of the caller's addresses."""

    def __init__(
        self,
        address_repository: AddressRepository,
        ownership_validator: OwnershipValidator,
        current_user: Principal,
    ):
        self._address_repo = address_repository
        self._validator = ownership_validator
        self._caller_id = IdentityResolver.resolve(current_user)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateUserAddressCommand:
        return cls(
            address_repository=factory.address_repository(),
            ownership_validator=OwnershipValidator.from_factory(factory),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        user_id: int,
        address_id: int,
        info: AddressInformationDTO,
    ) -> User:
        chain = await self._validator.address(self._caller_id, user_id, address_id)

        AggregateMergeService.merge_address_update(chain.address, info)
        await self._address_repo.save(chain.address)

        logger.debug("Updated address %s of user %s", address_id, user_id)
        return chain.user


class DeleteUserAddressCommand:
    """Delete one of the caller's addresses. A maker keeps at least one."""

    def __init__(
        self,
        address_repository: AddressRepository,
        ownership_validator: OwnershipValidator,
        current_user: Principal,
    ):
        self._address_repo = address_repository
        self._validator = ownership_validator
        self._caller_id = IdentityResolver.resolve(current_user)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteUserAddressCommand:
        return cls(
            address_repository=factory.address_repository(),
            ownership_validator=OwnershipValidator.from_factory(factory),
            current_user=factory.current_user,
        )

    async def execute(self, user_id: int, address_id: int) -> User:
        chain = await self._validator.address(self._caller_id, user_id, address_id)
        user = chain.user

        if user.is_maker and len(user.addresses) <= 1:
            raise MakerAddressRequiredError(user_id)

        await self._address_repo.delete(chain.address)
        user.remove_address(chain.address)

        logger.info("Deleted address %s of user %s", address_id, user_id)
        return user
