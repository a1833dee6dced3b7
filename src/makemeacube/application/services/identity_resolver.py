"""Map an authenticated principal to the user it may act as."""

from makemeacube.application.ports.identity import Principal
from makemeacube.domain.user import AuthenticationMismatchError


class IdentityResolver:
    @staticmethod
    def resolve(principal: Principal) -> int:
        """Return the user id of ``principal``.

        Raises
        ------
        AuthenticationMismatchError
            If the principal carries no user id. Upstream authentication
            should make this impossible.
        """
        if principal.user_id is None:
            msg = f"Principal {principal.email!r} is not bound to a user"
            raise AuthenticationMismatchError(msg)
        return principal.user_id
