"""Material entity: a consumable attached to exactly one maker tool.

Materials are never edited. Changing a tool's materials replaces them with
new Material instances (see MakerTool.replace_materials).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from makemeacube.domain.shared.identity import StorageIdentity
from makemeacube.domain.user.value_objects import MaterialType

if TYPE_CHECKING:
    from makemeacube.domain.user.entities.maker_tool import MakerTool


class Material(StorageIdentity):
    def __init__(
        self,
        material_type: MaterialType,
        owner: MakerTool,
        colors: Optional[str] = None,
        description: Optional[str] = None,
        id: Optional[int] = None,
    ):
        self._id = id
        self._material_type = (
            material_type
            if isinstance(material_type, MaterialType)
            else MaterialType(material_type)
        )
        self._owner = owner
        self._colors = colors
        self._description = description

    @property
    def material_type(self) -> MaterialType:
        return self._material_type

    @property
    def colors(self) -> Optional[str]:
        return self._colors

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def owner(self) -> MakerTool:
        return self._owner

    @property
    def owner_id(self) -> Optional[int]:
        return self._owner.id

    def __repr__(self) -> str:
        return (
            f"Material(id={self._id}, type={self._material_type.value}, "
            f"tool_id={self.owner_id})"
        )
