"""End-to-end workflows: commands, queries and SQLAlchemy repositories."""

import pytest

from makemeacube.application.commands.registration import (
    BasicUserRegistrationCommand,
    MakerUserRegistrationCommand,
    VerifyUserEmailCommand,
)
from makemeacube.application.commands.user import (
    AddPrinter3DCommand,
    AddUserAddressCommand,
    DeleteMakerToolCommand,
    DeleteUserAddressCommand,
    UpdatePrinter3DCommand,
    UpdateUserAddressCommand,
    UpdateUserInformationCommand,
)
from makemeacube.application.queries.user import GetMakerToolMaterialQuery, GetUserQuery
from makemeacube.domain.user import (
    EmailAlreadyExistsError,
    MakerAddressRequiredError,
    MaterialNotFoundError,
    MaterialType,
    OwnershipViolationError,
    RegistrationProvider,
)
from makemeacube.infrastructure.security import PasswordHashingService
from tests.shared.fixtures.factories import TestInputFactory

pytestmark = pytest.mark.e2e


async def _register_basic(request_scope, notifier, registration):
    async with request_scope() as factory:
        command = BasicUserRegistrationCommand(
            user_repository=factory.user_repository(),
            password_service=PasswordHashingService(rounds=4),
            notifier=notifier,
        )
        return await command.execute(registration)


async def _register_maker(request_scope, notifier, registration):
    async with request_scope() as factory:
        command = MakerUserRegistrationCommand(
            user_repository=factory.user_repository(),
            password_service=PasswordHashingService(rounds=4),
            notifier=notifier,
        )
        return await command.execute(registration)


async def _get_user(request_scope, user_id):
    async with request_scope(user_id) as factory:
        return await GetUserQuery.from_factory(factory).execute(user_id)


class TestRegistrationWorkflow:
    @pytest.mark.asyncio
    async def test_basic_registration_then_duplicate(self, request_scope, notifier):
        user = await _register_basic(
            request_scope,
            notifier,
            TestInputFactory.basic_registration(
                mail="a@x.com",
                pseudo="alice",
                password="P@ssw0rd1",
            ),
        )

        assert user.pseudo == "alice"
        assert user.id is not None
        assert user.registration_provider == RegistrationProvider.LOCAL
        notifier.send_verification.assert_called_once_with(user)

        with pytest.raises(EmailAlreadyExistsError):
            await _register_basic(
                request_scope,
                notifier,
                TestInputFactory.basic_registration(mail="A@X.com", pseudo="eve"),
            )

        stored = await _get_user(request_scope, user.id)
        assert stored.pseudo == "alice"

    @pytest.mark.asyncio
    async def test_maker_registration_carries_one_address(
        self,
        request_scope,
        notifier,
    ):
        user = await _register_maker(
            request_scope,
            notifier,
            TestInputFactory.maker_registration(),
        )

        stored = await _get_user(request_scope, user.id)
        assert stored.is_maker is True
        assert [a.city for a in stored.addresses] == ["Paris"]
        assert stored.addresses[0].id == user.addresses[0].id

    @pytest.mark.asyncio
    async def test_verify_email(self, request_scope, notifier):
        user = await _register_basic(
            request_scope,
            notifier,
            TestInputFactory.basic_registration(),
        )

        async with request_scope() as factory:
            await VerifyUserEmailCommand.from_factory(factory).execute(user.id)

        assert (await _get_user(request_scope, user.id)).is_verified is True


class TestMakerToolWorkflow:
    @pytest.mark.asyncio
    async def test_printer_materials_are_replaced_with_new_ids(
        self,
        request_scope,
        notifier,
    ):
        maker = await _register_maker(
            request_scope,
            notifier,
            TestInputFactory.maker_registration(),
        )

        async with request_scope(maker.id) as factory:
            user = await AddPrinter3DCommand.from_factory(factory).execute(
                maker.id,
                TestInputFactory.printer(
                    materials=(
                        TestInputFactory.material(MaterialType.PLA, "red"),
                        TestInputFactory.material(MaterialType.PETG, "blue"),
                    ),
                ),
            )
        printer = user.maker_tools[0]
        old_ids = {m.id for m in printer.materials}
        assert len(old_ids) == 2

        async with request_scope(maker.id) as factory:
            await UpdatePrinter3DCommand.from_factory(factory).execute(
                maker.id,
                printer.id,
                TestInputFactory.printer(
                    name="Ender 3 V3",
                    materials=(TestInputFactory.material(MaterialType.PLA, "red"),),
                ),
            )

        stored = await _get_user(request_scope, maker.id)
        (tool,) = stored.maker_tools
        assert tool.id == printer.id
        assert tool.name == "Ender 3 V3"
        assert len(tool.materials) == 1
        assert tool.materials[0].material_type is MaterialType.PLA
        assert tool.materials[0].colors == "red"
        assert tool.materials[0].id not in old_ids

        async with request_scope(maker.id) as factory:
            query = GetMakerToolMaterialQuery.from_factory(factory)
            material = await query.execute(maker.id, tool.id, tool.materials[0].id)
            assert material.colors == "red"

            with pytest.raises(MaterialNotFoundError):
                await query.execute(maker.id, tool.id, min(old_ids))

    @pytest.mark.asyncio
    async def test_delete_printer(self, request_scope, notifier):
        maker = await _register_maker(
            request_scope,
            notifier,
            TestInputFactory.maker_registration(),
        )
        async with request_scope(maker.id) as factory:
            user = await AddPrinter3DCommand.from_factory(factory).execute(
                maker.id,
                TestInputFactory.printer(
                    materials=(TestInputFactory.material(),),
                ),
            )
        tool_id = user.maker_tools[0].id

        async with request_scope(maker.id) as factory:
            await DeleteMakerToolCommand.from_factory(factory).execute(
                maker.id,
                tool_id,
            )

        assert (await _get_user(request_scope, maker.id)).maker_tools == ()


class TestProfileAndAddressWorkflow:
    @pytest.mark.asyncio
    async def test_profile_update_keeps_identity_and_children(
        self,
        request_scope,
        notifier,
    ):
        maker = await _register_maker(
            request_scope,
            notifier,
            TestInputFactory.maker_registration(),
        )

        async with request_scope(maker.id) as factory:
            await UpdateUserInformationCommand.from_factory(factory).execute(
                maker.id,
                TestInputFactory.profile(is_maker=True, pseudo="renamed"),
            )

        stored = await _get_user(request_scope, maker.id)
        assert stored.pseudo == "renamed"
        assert stored.id == maker.id
        assert stored.email == maker.email
        assert stored.registration_provider == maker.registration_provider
        assert len(stored.addresses) == 1

    @pytest.mark.asyncio
    async def test_address_update_is_idempotent(self, request_scope, notifier):
        maker = await _register_maker(
            request_scope,
            notifier,
            TestInputFactory.maker_registration(),
        )
        address_id = maker.addresses[0].id
        info = TestInputFactory.address(city="Marseille")

        snapshots = []
        for _ in range(2):
            async with request_scope(maker.id) as factory:
                await UpdateUserAddressCommand.from_factory(factory).execute(
                    maker.id,
                    address_id,
                    info,
                )
            stored = (await _get_user(request_scope, maker.id)).addresses[0]
            snapshots.append(
                (stored.id, stored.address, stored.city, stored.postal_code),
            )

        assert snapshots[0] == snapshots[1]
        assert snapshots[0][2] == "Marseille"

    @pytest.mark.asyncio
    async def test_maker_keeps_at_least_one_address(self, request_scope, notifier):
        maker = await _register_maker(
            request_scope,
            notifier,
            TestInputFactory.maker_registration(),
        )
        first_id = maker.addresses[0].id

        with pytest.raises(MakerAddressRequiredError):
            async with request_scope(maker.id) as factory:
                await DeleteUserAddressCommand.from_factory(factory).execute(
                    maker.id,
                    first_id,
                )

        async with request_scope(maker.id) as factory:
            await AddUserAddressCommand.from_factory(factory).execute(
                maker.id,
                TestInputFactory.address(city="Lille"),
            )
        async with request_scope(maker.id) as factory:
            user = await DeleteUserAddressCommand.from_factory(factory).execute(
                maker.id,
                first_id,
            )

        assert [a.city for a in user.addresses] == ["Lille"]
        stored = await _get_user(request_scope, maker.id)
        assert [a.city for a in stored.addresses] == ["Lille"]


class TestCrossUserIsolation:
    @pytest.mark.asyncio
    async def test_cannot_touch_another_users_resources(
        self,
        request_scope,
        notifier,
    ):
        alice = await _register_maker(
            request_scope,
            notifier,
            TestInputFactory.maker_registration(mail="alice@x.com"),
        )
        bob = await _register_maker(
            request_scope,
            notifier,
            TestInputFactory.maker_registration(mail="bob@x.com"),
        )
        async with request_scope(alice.id) as factory:
            alice = await AddPrinter3DCommand.from_factory(factory).execute(
                alice.id,
                TestInputFactory.printer(materials=(TestInputFactory.material(),)),
            )
        alice_address_id = alice.addresses[0].id
        alice_tool_id = alice.maker_tools[0].id

        attempts = [
            lambda f: UpdateUserAddressCommand.from_factory(f).execute(
                bob.id,
                alice_address_id,
                TestInputFactory.address(city="Hacked"),
            ),
            lambda f: DeleteUserAddressCommand.from_factory(f).execute(
                bob.id,
                alice_address_id,
            ),
            lambda f: UpdatePrinter3DCommand.from_factory(f).execute(
                bob.id,
                alice_tool_id,
                TestInputFactory.printer(name="Hacked"),
            ),
            lambda f: DeleteMakerToolCommand.from_factory(f).execute(
                bob.id,
                alice_tool_id,
            ),
            # Addressing Alice directly is refused as well
            lambda f: DeleteMakerToolCommand.from_factory(f).execute(
                alice.id,
                alice_tool_id,
            ),
        ]
        for attempt in attempts:
            with pytest.raises(OwnershipViolationError):
                async with request_scope(bob.id) as factory:
                    await attempt(factory)

        stored_alice = await _get_user(request_scope, alice.id)
        assert stored_alice.addresses[0].city == "Paris"
        assert stored_alice.maker_tools[0].name == "Ender 3"
        assert len(stored_alice.maker_tools[0].materials) == 1

        stored_bob = await _get_user(request_scope, bob.id)
        assert len(stored_bob.addresses) == 1
        assert stored_bob.maker_tools == ()
