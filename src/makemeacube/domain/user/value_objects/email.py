"""Email address of a user account.

The address is the login identifier of a MakeMeACube account, so it is
compared case-insensitively and stored lower-cased. Its length is capped by
the ``users.email`` column.
"""

import re
from dataclasses import dataclass

from makemeacube.domain.user.exceptions import InvalidEmailError

MAX_EMAIL_LENGTH = 255

_ADDRESS = re.compile(
    r"^(?P<local>[a-z0-9._%+-]+)@(?P<domain>[a-z0-9.-]+\.[a-z]{2,})$",
)


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        address = (self.value or "").strip().lower()
        if not address:
            raise InvalidEmailError("Email is required")
        if len(address) > MAX_EMAIL_LENGTH:
            raise InvalidEmailError(
                f"Email must be at most {MAX_EMAIL_LENGTH} characters",
            )
        if _ADDRESS.match(address) is None:
            raise InvalidEmailError(f"'{self.value}' is not a valid email address")
        object.__setattr__(self, "value", address)

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[1]

    def __str__(self) -> str:
        return self.value
