"""Add, update or delete the caller's maker tools."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from makemeacube.application.dtos.user import Printer3DInformationDTO
from makemeacube.application.services import AggregateMergeService, IdentityResolver
from makemeacube.domain.user import (
    MakerToolNotFoundError,
    MakerToolRepository,
    NotAMakerError,
    Printer3D,
    User,
)
from makemeacube.domain.user.services import OwnershipValidator

if TYPE_CHECKING:
    from makemeacube.application.factories import RepositoryFactory
    from makemeacube.application.ports.identity import Principal

logger = logging.getLogger(__name__)


def _ensure_maker(user: User) -> None:
    if not user.is_maker:
        raise NotAMakerError(user.id)


class AddPrinter3DCommand:
    def __init__(
        self,
        maker_tool_repository: MakerToolRepository,
        ownership_validator: OwnershipValidator,
        current_user: Principal,
    ):
        self._tool_repo = maker_tool_repository
        self._validator = ownership_validator
        self._caller_id = IdentityResolver.resolve(current_user)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddPrinter3DCommand:
        return cls(
            maker_tool_repository=factory.maker_tool_repository(),
            ownership_validator=OwnershipValidator.from_factory(factory),
            current_user=factory.current_user,
        )

    async def execute(self, user_id: int, info: Printer3DInformationDTO) -> User:
        user = await self._validator.user(self._caller_id, user_id)
        _ensure_maker(user)

        printer = AggregateMergeService.merge_tool_create(user, info)
        await self._tool_repo.save(printer)
        user.add_maker_tool(printer)

        logger.info(
            "Added 3D printer %s with %d materials to user %s",
            printer.id,
            len(printer.materials),
            user_id,
        )
        return user


class UpdatePrinter3DCommand:
    """Overwrite a printer and replace its whole material list."""

    def __init__(
        self,
        maker_tool_repository: MakerToolRepository,
        ownership_validator: OwnershipValidator,
        current_user: Principal,
    ):
        self._tool_repo = maker_tool_repository
        self._validator = ownership_validator
        self._caller_id = IdentityResolver.resolve(current_user)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdatePrinter3DCommand:
        return cls(
            maker_tool_repository=factory.maker_tool_repository(),
            ownership_validator=OwnershipValidator.from_factory(factory),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        user_id: int,
        tool_id: int,
        info: Printer3DInformationDTO,
    ) -> User:
        chain = await self._validator.maker_tool(self._caller_id, user_id, tool_id)
        _ensure_maker(chain.user)

        printer = chain.tool
        if not isinstance(printer, Printer3D):
            raise MakerToolNotFoundError(tool_id)

        discarded = AggregateMergeService.merge_tool_update(printer, info)
        await self._tool_repo.save(printer)

        logger.debug(
            "Updated 3D printer %s of user %s (%d materials replaced by %d)",
            tool_id,
            user_id,
            len(discarded),
            len(printer.materials),
        )
        return chain.user


class DeleteMakerToolCommand:
    """Delete a tool and its materials. Allowed even if no longer a maker."""

    def __init__(
        self,
        maker_tool_repository: MakerToolRepository,
        ownership_validator: OwnershipValidator,
        current_user: Principal,
    ):
        self._tool_repo = maker_tool_repository
        self._validator = ownership_validator
        self._caller_id = IdentityResolver.resolve(current_user)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteMakerToolCommand:
        return cls(
            maker_tool_repository=factory.maker_tool_repository(),
            ownership_validator=OwnershipValidator.from_factory(factory),
            current_user=factory.current_user,
        )

    async def execute(self, user_id: int, tool_id: int) -> User:
        chain = await self._validator.maker_tool(self._caller_id, user_id, tool_id)

        await self._tool_repo.delete(chain.tool)
        chain.user.remove_maker_tool(chain.tool)

        logger.info("Deleted maker tool %s of user %s", tool_id, user_id)
        return chain.user
