"""Ports: what the application needs from the outside world."""

from makemeacube.application.ports.identity import Principal
from makemeacube.application.ports.notification import VerificationNotifier

__all__ = ["Principal", "VerificationNotifier"]
