from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user.address_repository import (  # NOQA: E501
    AddressRepositorySQLAlchemy,
)
from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user.maker_tool_repository import (  # NOQA: E501
    MakerToolRepositorySQLAlchemy,
)
from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user.material_repository import (  # NOQA: E501
    MaterialRepositorySQLAlchemy,
)
from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AddressRepositorySQLAlchemy",
    "MakerToolRepositorySQLAlchemy",
    "MaterialRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
