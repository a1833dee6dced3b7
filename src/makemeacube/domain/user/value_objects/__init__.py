"""User domain value objects."""

from makemeacube.domain.user.value_objects.dimensions import Dimensions
from makemeacube.domain.user.value_objects.email import Email
from makemeacube.domain.user.value_objects.maker_types import (
    MaterialType,
    Printer3DType,
)
from makemeacube.domain.user.value_objects.registration import (
    RegistrationProvider,
    RegistrationStatus,
)

__all__ = [
    "Dimensions",
    "Email",
    "MaterialType",
    "Printer3DType",
    "RegistrationProvider",
    "RegistrationStatus",
]
