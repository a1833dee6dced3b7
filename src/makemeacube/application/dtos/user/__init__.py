"""User DTOs: pure data carriers between the transport layer and use cases."""

from makemeacube.application.dtos.user.address_dto import AddressInformationDTO
from makemeacube.application.dtos.user.maker_tool_dto import (
    MaterialInformationDTO,
    Printer3DInformationDTO,
)
from makemeacube.application.dtos.user.registration_dto import (
    BasicUserRegistrationDTO,
    MakerUserRegistrationDTO,
)
from makemeacube.application.dtos.user.user_dto import (
    AddressDTO,
    MakerToolDTO,
    MaterialDTO,
    UserDTO,
)
from makemeacube.application.dtos.user.user_information_dto import (
    UserUpdatedInformationDTO,
)

__all__ = [
    "AddressDTO",
    "AddressInformationDTO",
    "BasicUserRegistrationDTO",
    "MakerToolDTO",
    "MakerUserRegistrationDTO",
    "MaterialDTO",
    "MaterialInformationDTO",
    "Printer3DInformationDTO",
    "UserDTO",
    "UserUpdatedInformationDTO",
]
