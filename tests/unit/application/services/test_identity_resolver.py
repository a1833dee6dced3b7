"""Unit tests for IdentityResolver."""

import pytest

from makemeacube.application.ports.identity import Principal
from makemeacube.application.services import IdentityResolver
from makemeacube.domain.shared.exceptions import ErrorCode
from makemeacube.domain.user import AuthenticationMismatchError


class TestIdentityResolver:
    def test_returns_user_id(self):
        principal = Principal(user_id=42, email="a@x.com")

        assert IdentityResolver.resolve(principal) == 42

    def test_principal_without_user_is_rejected(self):
        principal = Principal(user_id=None, email="ghost@x.com")

        with pytest.raises(AuthenticationMismatchError) as exc_info:
            IdentityResolver.resolve(principal)

        assert exc_info.value.code == ErrorCode.AUTHENTICATION_MISMATCH
        assert "ghost@x.com" in exc_info.value.message
