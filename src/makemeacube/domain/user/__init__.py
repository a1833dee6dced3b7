"""User domain - user accounts, maker profiles and their owned resources.

This domain handles:
- User aggregate (identity, profile, maker flag)
- Addresses owned by a user
- Maker tools (3D printers) and their materials
- Ownership validation along user -> tool -> material chains

Design notes:
- Identifiers are assigned by the persistence gateway on first save;
  an entity that has not been saved has ``id is None``
- Email and registration provider never change after registration
- Repository interfaces defined here, implementations in infrastructure
"""

from makemeacube.domain.user.aggregates import User
from makemeacube.domain.user.entities import Address, MakerTool, Material, Printer3D
from makemeacube.domain.user.exceptions import (
    AddressNotFoundError,
    AuthenticationMismatchError,
    EmailAlreadyExistsError,
    InvalidDimensionsError,
    InvalidEmailError,
    MakerAddressRequiredError,
    MakerToolNotFoundError,
    MaterialNotFoundError,
    NotAMakerError,
    OwnershipViolationError,
    UserNotFoundError,
    WeakPasswordError,
)
from makemeacube.domain.user.repositories import (
    AddressRepository,
    MakerToolRepository,
    MaterialRepository,
    UserRepository,
)
from makemeacube.domain.user.value_objects import (
    Dimensions,
    Email,
    MaterialType,
    Printer3DType,
    RegistrationProvider,
    RegistrationStatus,
)

__all__ = [
    "Address",
    "AddressNotFoundError",
    "AddressRepository",
    "AuthenticationMismatchError",
    "Dimensions",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidDimensionsError",
    "InvalidEmailError",
    "MakerAddressRequiredError",
    "MakerTool",
    "MakerToolNotFoundError",
    "MakerToolRepository",
    "Material",
    "MaterialNotFoundError",
    "MaterialRepository",
    "MaterialType",
    "NotAMakerError",
    "OwnershipViolationError",
    "Printer3D",
    "Printer3DType",
    "RegistrationProvider",
    "RegistrationStatus",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "WeakPasswordError",
]
