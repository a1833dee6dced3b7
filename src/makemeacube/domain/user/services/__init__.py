"""User domain services."""

from makemeacube.domain.user.services.ownership_validator import (
    AddressChain,
    MakerToolChain,
    MaterialChain,
    OwnershipValidator,
)

__all__ = [
    "AddressChain",
    "MakerToolChain",
    "MaterialChain",
    "OwnershipValidator",
]
