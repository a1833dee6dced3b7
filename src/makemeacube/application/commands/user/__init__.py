"""User commands - mutations of a user aggregate by its owner."""

from makemeacube.application.commands.user.maker_tool_commands import (
    AddPrinter3DCommand,
    DeleteMakerToolCommand,
    UpdatePrinter3DCommand,
)
from makemeacube.application.commands.user.update_user_information_command import (
    UpdateUserInformationCommand,
)
from makemeacube.application.commands.user.user_address_commands import (
    AddUserAddressCommand,
    DeleteUserAddressCommand,
    UpdateUserAddressCommand,
)

__all__ = [
    # Profile
    "UpdateUserInformationCommand",
    # Addresses
    "AddUserAddressCommand",
    "DeleteUserAddressCommand",
    "UpdateUserAddressCommand",
    # Maker tools
    "AddPrinter3DCommand",
    "DeleteMakerToolCommand",
    "UpdatePrinter3DCommand",
]
