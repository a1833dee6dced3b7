from makemeacube.application.queries.user.get_maker_tool_material_query import (
    GetMakerToolMaterialQuery,
)
from makemeacube.application.queries.user.get_user_query import GetUserQuery

__all__ = ["GetMakerToolMaterialQuery", "GetUserQuery"]
