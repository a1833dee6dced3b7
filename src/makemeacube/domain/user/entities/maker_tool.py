"""Maker tool base entity.

A maker tool belongs to exactly one user and carries an ordered list of
materials. Concrete tool kinds (see Printer3D) add their own specification.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Iterable, Optional

from makemeacube.domain.shared.identity import StorageIdentity

if TYPE_CHECKING:
    from makemeacube.domain.user.aggregates.user import User
    from makemeacube.domain.user.entities.material import Material


class MakerTool(StorageIdentity):
    """Base class for every tool kind a maker can register."""

    kind: ClassVar[str] = "maker_tool"

    def __init__(  # NOQA: PLR0913
        self,
        owner: User,
        name: str,
        description: str,
        reference: Optional[str] = None,
        id: Optional[int] = None,
    ):
        self._id = id
        self._owner = owner
        self._name = name
        self._description = description
        self._reference = reference
        self._materials: list[Material] = []

    @property
    def owner(self) -> User:
        return self._owner

    @property
    def owner_id(self) -> Optional[int]:
        return self._owner.id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def reference(self) -> Optional[str]:
        return self._reference

    @property
    def materials(self) -> tuple[Material, ...]:
        return tuple(self._materials)

    def describe(self, name: str, description: str, reference: Optional[str]) -> None:
        self._name = name
        self._description = description
        self._reference = reference

    def find_material(self, material_id: int) -> Optional[Material]:
        for material in self._materials:
            if material.id == material_id:
                return material
        return None

    def replace_materials(self, materials: Iterable[Material]) -> list[Material]:
        """Swap the whole material list and return the discarded materials.

        Every incoming material must be owned by this tool and not yet
        persisted: prior material identities are never carried over.
        """
        incoming = list(materials)
        for material in incoming:
            if material.owner is not self:
                msg = "Material must be owned by the tool it is attached to"
                raise ValueError(msg)
            if material.is_persisted:
                msg = "Replacement materials must not be persisted yet"
                raise ValueError(msg)

        discarded = self._materials
        self._materials = incoming
        return discarded

    def load_materials(self, materials: Iterable[Material]) -> None:
        """Attach already-persisted materials when rebuilding from storage."""
        self._materials = list(materials)

    def attach_to(self, owner: User) -> None:
        self._owner = owner

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(id={self._id}, name={self._name!r}, "
            f"owner_id={self.owner_id}, materials={len(self._materials)})"
        )
