"""Input DTOs for user registration."""

from dataclasses import dataclass

from makemeacube.application.dtos.user.address_dto import AddressInformationDTO


@dataclass(frozen=True)
class BasicUserRegistrationDTO:
    mail: str
    pseudo: str
    password: str


@dataclass(frozen=True)
class MakerUserRegistrationDTO:
    """Registration of a maker: a basic profile plus identity and one address."""

    mail: str
    pseudo: str
    password: str
    first_name: str
    last_name: str
    address: AddressInformationDTO
    phone: str
    maker_description: str
