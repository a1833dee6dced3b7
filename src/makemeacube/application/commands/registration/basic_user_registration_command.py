"""Register a basic (non-maker) user."""

from makemeacube.application.commands.registration._registration import (
    RegistrationSteps,
)
from makemeacube.application.dtos.user import BasicUserRegistrationDTO
from makemeacube.application.ports.notification import VerificationNotifier
from makemeacube.domain.user import RegistrationProvider, User, UserRepository
from makemeacube.infrastructure.security import PasswordHashingService


class BasicUserRegistrationCommand:
    """Create a pending user without address, tool or maker profile."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        notifier: VerificationNotifier,
    ):
        self._steps = RegistrationSteps(
            user_repository=user_repository,
            password_service=password_service,
            notifier=notifier,
        )

    async def execute(
        self,
        registration: BasicUserRegistrationDTO,
        provider: RegistrationProvider = RegistrationProvider.LOCAL,
    ) -> User:
        email = await self._steps.ensure_email_available(registration.mail)

        user = User.create(
            email=email,
            pseudo=registration.pseudo,
            password_hash=self._steps.hash_password(registration.password),
            registration_provider=provider,
        )
        return await self._steps.persist_and_notify(user)
