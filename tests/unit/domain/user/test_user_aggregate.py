"""Unit tests for the User aggregate."""

from datetime import timedelta

import pytest

from makemeacube.domain.user import (
    Address,
    Dimensions,
    Printer3D,
    Printer3DType,
    RegistrationProvider,
    RegistrationStatus,
    User,
)
from tests.shared.fixtures.factories import TestUserFactory


class TestUserCreation:
    def test_create_basic_user(self):
        user = User.create("Alice@Example.com", "alice", "hash")

        assert user.id is None
        assert user.is_persisted is False
        assert user.email == "alice@example.com"
        assert user.is_maker is False
        assert user.registration_provider == RegistrationProvider.LOCAL
        assert user.registration_status == RegistrationStatus.PENDING
        assert user.addresses == ()
        assert user.maker_tools == ()

    def test_create_maker(self):
        user = User.create_maker(
            email="m@x.com",
            pseudo="m",
            password_hash="hash",
            first_name="Ada",
            last_name="Lovelace",
            phone="06",
            maker_description="desc",
            registration_provider=RegistrationProvider.GOOGLE,
        )

        assert user.is_maker is True
        assert user.first_name == "Ada"
        assert user.registration_provider == RegistrationProvider.GOOGLE

    def test_constructor_attaches_children_to_the_new_instance(self):
        original = TestUserFactory.maker()

        copy = User(
            id=original.id,
            email=original.email_obj,
            pseudo="copy",
            password_hash=original.password_hash,
            registration_provider=original.registration_provider,
            addresses=original.addresses,
            maker_tools=original.maker_tools,
        )

        assert all(a.owner is copy for a in copy.addresses)
        assert all(t.owner is copy for t in copy.maker_tools)


class TestIdentity:
    def test_assign_id_once(self):
        user = User.create("a@x.com", "a", "hash")
        user.assign_id(7)

        assert user.id == 7
        assert user.is_persisted is True

    def test_assign_same_id_again_is_a_no_op(self):
        user = TestUserFactory.basic()
        user.assign_id(TestUserFactory.BOB_ID)

        assert user.id == TestUserFactory.BOB_ID

    def test_reassigning_a_different_id_fails(self):
        user = TestUserFactory.basic()

        with pytest.raises(ValueError):
            user.assign_id(99)


class TestChildren:
    def test_add_address_owned_by_user(self):
        user = TestUserFactory.basic()
        address = Address("1 st", "Lyon", "France", "69000", owner=user)

        user.add_address(address)

        assert user.addresses == (address,)
        assert address.owner_id == user.id

    def test_add_address_owned_by_another_user_fails(self):
        user = TestUserFactory.basic()
        other = TestUserFactory.maker()
        address = Address("1 st", "Lyon", "France", "69000", owner=other)

        with pytest.raises(ValueError):
            user.add_address(address)

    def test_find_and_remove_address(self):
        user = TestUserFactory.bob()
        address = user.find_address(TestUserFactory.BOB_ADDRESS_ID)

        user.remove_address(address)

        assert user.find_address(TestUserFactory.BOB_ADDRESS_ID) is None

    def test_find_unknown_child_returns_none(self):
        user = TestUserFactory.maker()

        assert user.find_address(999) is None
        assert user.find_maker_tool(999) is None

    def test_add_and_remove_maker_tool(self):
        user = TestUserFactory.maker()
        printer = Printer3D(
            owner=user,
            name="Form 3",
            description="Resin",
            volume=Dimensions(145, 145, 185),
            accuracy=Dimensions(1, 1, 1),
            layer_thickness=25,
            printer_type=Printer3DType.SLA,
        )

        user.add_maker_tool(printer)
        assert len(user.maker_tools) == 2

        user.remove_maker_tool(printer)
        assert len(user.maker_tools) == 1

    def test_collections_are_read_only_views(self):
        user = TestUserFactory.bob()

        assert isinstance(user.addresses, tuple)
        assert isinstance(user.maker_tools, tuple)


class TestVerification:
    def test_verify_email(self):
        user = TestUserFactory.basic()
        before = user.updated_at - timedelta(seconds=1)

        user.verify_email()

        assert user.is_verified is True
        assert user.updated_at > before

    def test_verify_email_is_idempotent(self):
        user = TestUserFactory.basic()
        user.verify_email()
        stamp = user.updated_at

        user.verify_email()

        assert user.updated_at == stamp
        assert user.registration_status == RegistrationStatus.VERIFIED
