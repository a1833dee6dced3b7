"""SQLAlchemy implementation of MaterialRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from makemeacube.domain.user import Material, MaterialRepository
from makemeacube.infrastructure.persistence.sqlalchemy.models import (
    MakerToolModel,
    MaterialModel,
)
from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)


class MaterialRepositorySQLAlchemy(MaterialRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._users = UserRepositorySQLAlchemy(session)

    async def find_by_id(self, material_id: int) -> Optional[Material]:
        stmt = (
            select(MaterialModel.tool_id, MakerToolModel.user_id)
            .join(MakerToolModel, MaterialModel.tool_id == MakerToolModel.id)
            .where(MaterialModel.id == material_id)
        )
        row = (await self._session.execute(stmt)).one_or_none()
        if row is None:
            return None

        tool_id, user_id = row
        user = await self._users.find_by_id(user_id)
        if user is None:
            return None

        tool = user.find_maker_tool(tool_id)
        if tool is None:
            return None
        return tool.find_material(material_id)
