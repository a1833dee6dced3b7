"""Input DTO for updating a user's profile."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UserUpdatedInformationDTO:
    """Every field is written verbatim, ``None`` included.

    Email and registration provider are deliberately absent: they cannot be
    changed after registration.
    """

    pseudo: str
    phone: Optional[str]
    is_maker: bool
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    maker_description: Optional[str] = None
