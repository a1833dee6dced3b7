"""Register a maker user together with their first address."""

from makemeacube.application.commands.registration._registration import (
    RegistrationSteps,
)
from makemeacube.application.dtos.user import MakerUserRegistrationDTO
from makemeacube.application.ports.notification import VerificationNotifier
from makemeacube.application.services import AggregateMergeService
from makemeacube.domain.user import RegistrationProvider, User, UserRepository
from makemeacube.infrastructure.security import PasswordHashingService


class MakerUserRegistrationCommand:
    """Create a pending maker user; the address is saved with the user."""

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
        registration: MakerUserRegistrationDTO,
        provider: RegistrationProvider = RegistrationProvider.LOCAL,
    ) -> User:
        email = await self._steps.ensure_email_available(registration.mail)

        user = User.create_maker(
            email=email,
            pseudo=registration.pseudo,
            password_hash=self._steps.hash_password(registration.password),
            first_name=registration.first_name,
            last_name=registration.last_name,
            phone=registration.phone,
            maker_description=registration.maker_description,
            registration_provider=provider,
        )
        user.add_address(
            AggregateMergeService.merge_address_create(user, registration.address),
        )
        return await self._steps.persist_and_notify(user)
