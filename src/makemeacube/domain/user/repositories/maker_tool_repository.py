"""Maker tool repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from makemeacube.domain.user.entities import MakerTool


class MakerToolRepository(ABC):
    """Repository interface for maker tools.

    Saving a tool also stores its material list: new materials are inserted
    and materials no longer attached to the tool are removed.
    """

    @abstractmethod
    async def find_by_id(self, tool_id: int) -> Optional[MakerTool]:
        """Find a tool; its owner is the fully loaded User aggregate."""

    @abstractmethod
    async def save(self, tool: MakerTool) -> MakerTool:
        """Insert or update a tool together with its materials."""

    @abstractmethod
    async def delete(self, tool: MakerTool) -> None:
        """Delete a tool and its materials."""
