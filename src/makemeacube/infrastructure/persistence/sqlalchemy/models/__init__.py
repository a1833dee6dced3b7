"""SQLAlchemy models for persistence layer."""

from makemeacube.infrastructure.persistence.sqlalchemy.models.address_model import (
    AddressModel,
)
from makemeacube.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from makemeacube.infrastructure.persistence.sqlalchemy.models.maker_tool_model import (
    MakerToolModel,
    Printer3DModel,
)
from makemeacube.infrastructure.persistence.sqlalchemy.models.material_model import (
    MaterialModel,
)
from makemeacube.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "AddressModel",
    "Base",
    "MakerToolModel",
    "MaterialModel",
    "Printer3DModel",
    "TimestampMixin",
    "UserModel",
]
