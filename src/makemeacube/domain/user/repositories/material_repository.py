"""Material repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from makemeacube.domain.user.entities import Material


class MaterialRepository(ABC):
    @abstractmethod
    async def find_by_id(self, material_id: int) -> Optional[Material]:
        """Find a material; its owner tool belongs to a loaded User aggregate."""
