"""Outbound email."""

from makemeacube.infrastructure.email.verification_email_notifier import (
    EmailVerificationNotifier,
)

__all__ = ["EmailVerificationNotifier"]
