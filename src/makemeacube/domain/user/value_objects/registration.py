"""Registration provider and status enumerations."""

from enum import Enum


class RegistrationProvider(str, Enum):
    """Where the account was created. Immutable after registration."""

    LOCAL = "local"
    GOOGLE = "google"
    GITHUB = "github"


class RegistrationStatus(str, Enum):
    """Email verification state of a registered user."""

    PENDING = "pending"
    VERIFIED = "verified"
