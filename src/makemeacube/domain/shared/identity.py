"""Storage-assigned identity for entities.

Entities are created without an identifier. The persistence gateway assigns
one on first save; until then ``id`` is ``None`` and ``is_persisted`` is False.
"""

from typing import Optional


class StorageIdentity:
    """Mixin holding an identifier assigned once by the persistence gateway."""

    _id: Optional[int]

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def assign_id(self, value: int) -> None:
        if self._id is not None and self._id != value:
            msg = (
                f"{self.__class__.__name__} already has identifier {self._id}, "
                f"cannot reassign to {value}"
            )
            raise ValueError(msg)
        self._id = value
