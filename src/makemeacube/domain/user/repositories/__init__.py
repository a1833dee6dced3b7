"""Persistence gateway interfaces for the user domain."""

from makemeacube.domain.user.repositories.address_repository import (
    AddressRepository,
)
from makemeacube.domain.user.repositories.maker_tool_repository import (
    MakerToolRepository,
)
from makemeacube.domain.user.repositories.material_repository import (
    MaterialRepository,
)
from makemeacube.domain.user.repositories.user_repository import UserRepository

__all__ = [
    "AddressRepository",
    "MakerToolRepository",
    "MaterialRepository",
    "UserRepository",
]
