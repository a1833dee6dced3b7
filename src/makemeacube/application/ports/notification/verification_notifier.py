"""Port for sending the email verification artifact out of band."""

from abc import ABC, abstractmethod

from makemeacube.domain.user import User


class VerificationNotifier(ABC):
    @abstractmethod
    def send_verification(self, user: User) -> None:
        """Send the verification message for a freshly registered user."""
