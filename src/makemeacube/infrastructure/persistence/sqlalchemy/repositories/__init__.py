"""SQLAlchemy repository implementations."""

from makemeacube.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from makemeacube.infrastructure.persistence.sqlalchemy.repositories.user import (
    AddressRepositorySQLAlchemy,
    MakerToolRepositorySQLAlchemy,
    MaterialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AddressRepositorySQLAlchemy",
    "MakerToolRepositorySQLAlchemy",
    "MaterialRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
