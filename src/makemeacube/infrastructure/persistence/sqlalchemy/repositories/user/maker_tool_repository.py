"""SQLAlchemy implementation of MakerToolRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from makemeacube.domain.user import (
    MakerTool,
    MakerToolNotFoundError,
    MakerToolRepository,
    UserNotFoundError,
)
from makemeacube.infrastructure.persistence.sqlalchemy.models import (
    MakerToolModel,
    UserModel,
)
from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user._mapping import (  # NOQA: E501
    IdentityAssignments,
    new_tool_model,
    update_tool_model,
)
from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
    find_user_model,
)

logger = logging.getLogger(__name__)


class MakerToolRepositorySQLAlchemy(MakerToolRepository):
    """Tools are stored through their owner's ``maker_tools`` collection."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._users = UserRepositorySQLAlchemy(session)

    async def find_by_id(self, tool_id: int) -> Optional[MakerTool]:
        stmt = select(MakerToolModel.user_id).where(MakerToolModel.id == tool_id)
        user_id = (await self._session.execute(stmt)).scalar_one_or_none()
        if user_id is None:
            return None

        user = await self._users.find_by_id(user_id)
        if user is None:
            return None
        return user.find_maker_tool(tool_id)

    async def save(self, tool: MakerTool) -> MakerTool:
        user_model = await self._owner_model(tool)
        ids = IdentityAssignments()

        model = self._find_in(user_model, tool.id)
        if model is None:
            model = new_tool_model(tool, ids)
            user_model.maker_tools.append(model)
        else:
            update_tool_model(model, tool, ids)
        ids.track(tool, model)

        await self._session.flush()
        ids.apply()
        logger.debug(
            "Saved maker tool %s of user %s (%d materials)",
            model.id,
            user_model.id,
            len(tool.materials),
        )
        return tool

    async def delete(self, tool: MakerTool) -> None:
        user_model = await self._owner_model(tool)

        model = self._find_in(user_model, tool.id)
        if model is None:
            raise MakerToolNotFoundError(tool.id)

        user_model.maker_tools.remove(model)
        await self._session.flush()
        logger.info("Deleted maker tool %s of user %s", tool.id, user_model.id)

    async def _owner_model(self, tool: MakerTool) -> UserModel:
        user_model = await find_user_model(self._session, tool.owner_id)
        if user_model is None:
            raise UserNotFoundError(tool.owner_id)
        return user_model

    @staticmethod
    def _find_in(user_model: UserModel, tool_id: Optional[int]):
        if tool_id is None:
            return None
        for model in user_model.maker_tools:
            if model.id == tool_id:
                return model
        return None
