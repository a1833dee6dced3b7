from makemeacube.application.ports.notification.verification_notifier import (
    VerificationNotifier,
)

__all__ = ["VerificationNotifier"]
