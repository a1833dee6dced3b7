"""Ownership validation for user-owned resources."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from makemeacube.domain.user.aggregates import User
from makemeacube.domain.user.entities import Address, MakerTool, Material
from makemeacube.domain.user.exceptions import (
    AddressNotFoundError,
    MakerToolNotFoundError,
    MaterialNotFoundError,
    OwnershipViolationError,
    UserNotFoundError,
)
from makemeacube.domain.user.repositories import (
    AddressRepository,
    MakerToolRepository,
    MaterialRepository,
    UserRepository,
)

if TYPE_CHECKING:
    from makemeacube.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddressChain:
    user: User
    address: Address


@dataclass(frozen=True)
class MakerToolChain:
    user: User
    tool: MakerTool


@dataclass(frozen=True)
class MaterialChain:
    user: User
    tool: MakerTool
    material: Material


class OwnershipValidator:
    """Resolve a resource path and check every owner link up to the caller.

    Each method returns the objects of one loaded User aggregate: the child in
    a chain is the instance held by ``chain.user``, so mutating it mutates the
    aggregate. Nothing is written.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        address_repository: AddressRepository,
        maker_tool_repository: MakerToolRepository,
        material_repository: MaterialRepository,
    ):
        self._user_repo = user_repository
        self._address_repo = address_repository
        self._tool_repo = maker_tool_repository
        self._material_repo = material_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> OwnershipValidator:
        return cls(
            user_repository=factory.user_repository(),
            address_repository=factory.address_repository(),
            maker_tool_repository=factory.maker_tool_repository(),
            material_repository=factory.material_repository(),
        )

    @staticmethod
    def ensure_same_user(caller_id: int, target_user_id: int) -> None:
        """Personal authorisation: a caller only acts on their own user."""
        if caller_id != target_user_id:
            logger.warning(
                "User %s attempted to act on user %s",
                caller_id,
                target_user_id,
            )
            raise OwnershipViolationError(
                resource="User",
                resource_id=target_user_id,
                expected_owner_id=caller_id,
                actual_owner_id=target_user_id,
            )

    async def user(self, caller_id: int, user_id: int) -> User:
        self.ensure_same_user(caller_id, user_id)
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def address(
        self,
        caller_id: int,
        user_id: int,
        address_id: int,
    ) -> AddressChain:
        self.ensure_same_user(caller_id, user_id)
        address = await self._address_repo.find_by_id(address_id)
        if address is None:
            raise AddressNotFoundError(address_id)
        self._check_owner("Address", address_id, user_id, address.owner_id)
        return AddressChain(user=address.owner, address=address)

    async def maker_tool(
        self,
        caller_id: int,
        user_id: int,
        tool_id: int,
    ) -> MakerToolChain:
        self.ensure_same_user(caller_id, user_id)
        tool = await self._tool_repo.find_by_id(tool_id)
        if tool is None:
            raise MakerToolNotFoundError(tool_id)
        self._check_owner("Maker tool", tool_id, user_id, tool.owner_id)
        return MakerToolChain(user=tool.owner, tool=tool)

    async def material(
        self,
        caller_id: int,
        user_id: int,
        tool_id: int,
        material_id: int,
    ) -> MaterialChain:
        tool_chain = await self.maker_tool(caller_id, user_id, tool_id)

        material = await self._material_repo.find_by_id(material_id)
        if material is None or material.owner_id != tool_id:
            # A material of another tool is indistinguishable from a missing one
            raise MaterialNotFoundError(material_id, tool_id)

        attached = tool_chain.tool.find_material(material_id)
        if attached is None:
            raise MaterialNotFoundError(material_id, tool_id)

        return MaterialChain(
            user=tool_chain.user,
            tool=tool_chain.tool,
            material=attached,
        )

    @staticmethod
    def _check_owner(
        resource: str,
        resource_id: int,
        expected_owner_id: int,
        actual_owner_id: int | None,
    ) -> None:
        if actual_owner_id != expected_owner_id:
            logger.warning(
                "%s %s is owned by %s, not by user %s",
                resource,
                resource_id,
                actual_owner_id,
                expected_owner_id,
            )
            raise OwnershipViolationError(
                resource=resource,
                resource_id=resource_id,
                expected_owner_id=expected_owner_id,
                actual_owner_id=actual_owner_id,
            )
