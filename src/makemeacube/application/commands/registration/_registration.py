"""Steps shared by the registration commands."""

import logging
from typing import Union

from makemeacube.application.ports.notification import VerificationNotifier
from makemeacube.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from makemeacube.infrastructure.security import PasswordHashingService

logger = logging.getLogger(__name__)


class RegistrationSteps:
    """Check the email, hash the password, persist, then notify."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        notifier: VerificationNotifier,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._notifier = notifier

    async def ensure_email_available(self, mail: Union[str, Email]) -> Email:
        email = mail if isinstance(mail, Email) else Email(mail)
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email.value)
        return email

    def hash_password(self, password: str) -> str:
        return self._password_service.hash(password)

    async def persist_and_notify(self, user: User) -> User:
        """Save the user, then send the verification message.

        The message leaves before the caller commits the transaction. If that
        commit fails the link names a user id that was never stored, and
        ``VerifyUserEmailCommand`` rejects it with ``UserNotFoundError``.
        """
        await self._user_repo.save(user)
        logger.info(
            "Registered user %s (email: %s, maker: %s, provider: %s)",
            user.id,
            user.email,
            user.is_maker,
            user.registration_provider.value,
        )
        self._send_verification(user)
        return user

    def _send_verification(self, user: User) -> None:
        # Registration stands even if the verification message is lost
        try:
            self._notifier.send_verification(user)
        except Exception as e:
            logger.warning(
                "Verification notification failed for user %s: %s",
                user.id,
                e,
            )
