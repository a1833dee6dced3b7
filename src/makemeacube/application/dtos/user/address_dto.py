"""Input DTO for creating or replacing an address."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AddressInformationDTO:
    address: str
    city: str
    country: str
    postal_code: str
