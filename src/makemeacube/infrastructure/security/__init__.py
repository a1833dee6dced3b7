"""Credential handling for registration."""

from makemeacube.infrastructure.security.password_service import (
    PasswordHashingService,
)

__all__ = ["PasswordHashingService"]
