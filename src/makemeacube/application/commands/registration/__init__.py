"""Registration commands - first-time creation of users."""

from makemeacube.application.commands.registration.basic_user_registration_command import (  # NOQA: E501
    BasicUserRegistrationCommand,
)
from makemeacube.application.commands.registration.maker_user_registration_command import (  # NOQA: E501
    MakerUserRegistrationCommand,
)
from makemeacube.application.commands.registration.verify_user_email_command import (  # NOQA: E501
    VerifyUserEmailCommand,
)

__all__ = [
    "BasicUserRegistrationCommand",
    "MakerUserRegistrationCommand",
    "VerifyUserEmailCommand",
]
