"""Tests for UserRepositorySQLAlchemy on in-memory SQLite."""

import pytest

from makemeacube.domain.user import (
    Address,
    Dimensions,
    EmailAlreadyExistsError,
    Material,
    MaterialType,
    Printer3D,
    Printer3DType,
    RegistrationStatus,
    User,
)
from makemeacube.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)


def _maker(email: str = "maker@example.com") -> User:
    user = User.create_maker(
        email=email,
        pseudo="maker",
        password_hash="hash",
        first_name="Ada",
        last_name="Lovelace",
        phone="0600",
        maker_description="desc",
    )
    user.add_address(Address("1 rue A", "Paris", "France", "75001", owner=user))
    printer = Printer3D(
        owner=user,
        name="Prusa",
        description="FDM",
        volume=Dimensions(250, 210, 220),
        accuracy=Dimensions(1, 1, 1),
        layer_thickness=200,
        printer_type=Printer3DType.FDM,
        reference="MK4",
    )
    printer.replace_materials(
        [
            Material(MaterialType.PLA, owner=printer, colors="red"),
            Material(MaterialType.PETG, owner=printer, description="tough"),
        ],
    )
    user.add_maker_tool(printer)
    return user


class TestUserRepositorySQLAlchemy:
    @pytest.mark.asyncio
    async def test_save_assigns_ids_to_the_whole_aggregate(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = _maker()

        returned = await repo.save(user)

        assert returned is user
        assert user.id is not None
        assert user.addresses[0].id is not None
        printer = user.maker_tools[0]
        assert printer.id is not None
        assert all(m.id is not None for m in printer.materials)

    @pytest.mark.asyncio
    async def test_round_trip(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = _maker()
        await repo.save(user)

        loaded = await repo.find_by_id(user.id)

        assert loaded is not user
        assert loaded.email == "maker@example.com"
        assert loaded.is_maker is True
        assert loaded.registration_status == RegistrationStatus.PENDING
        assert loaded.created_at.tzinfo is not None
        assert [a.city for a in loaded.addresses] == ["Paris"]
        assert all(a.owner is loaded for a in loaded.addresses)

        printer = loaded.maker_tools[0]
        assert isinstance(printer, Printer3D)
        assert printer.owner is loaded
        assert printer.volume == Dimensions(250, 210, 220)
        assert printer.printer_type is Printer3DType.FDM
        assert printer.reference == "MK4"
        assert [m.material_type for m in printer.materials] == [
            MaterialType.PLA,
            MaterialType.PETG,
        ]
        assert all(m.owner is printer for m in printer.materials)

    @pytest.mark.asyncio
    async def test_exists_by_email_is_case_insensitive(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.save(User.create("bob@example.com", "bob", "hash"))

        assert await repo.exists_by_email("bob@EXAMPLE.com") is True
        assert await repo.exists_by_email("nobody@example.com") is False

    @pytest.mark.asyncio
    async def test_find_missing_user(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        assert await repo.find_by_id(12345) is None

    @pytest.mark.asyncio
    async def test_duplicate_email_is_a_conflict(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.save(User.create("dup@example.com", "first", "hash"))

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(User.create("dup@example.com", "second", "hash"))

    @pytest.mark.asyncio
    async def test_update_syncs_children(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = _maker()
        await repo.save(user)
        first_address = user.addresses[0]

        loaded = await repo.find_by_id(user.id)
        loaded.remove_address(loaded.find_address(first_address.id))
        loaded.add_address(
            Address("2 rue B", "Lyon", "France", "69001", owner=loaded),
        )
        loaded.verify_email()
        await repo.save(loaded)

        reloaded = await repo.find_by_id(user.id)
        assert [a.city for a in reloaded.addresses] == ["Lyon"]
        assert reloaded.addresses[0].id != first_address.id
        assert reloaded.is_verified is True

    @pytest.mark.asyncio
    async def test_delete_removes_everything(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = _maker()
        await repo.save(user)

        await repo.delete(user.id)

        assert await repo.find_by_id(user.id) is None
        assert await repo.exists_by_email("maker@example.com") is False
