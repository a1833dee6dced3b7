"""Password hashing service using bcrypt.

Registration stores only the bcrypt hash of the submitted password; the
plaintext never reaches the User aggregate or the database.
"""

import bcrypt

from makemeacube.domain.user.exceptions import WeakPasswordError


class PasswordHashingService:
    """Validate and hash passwords submitted at registration.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> service.hash("P@ssw0rd1").startswith("$2b$04$")
    True
    """

    MIN_LENGTH = 8
    # bcrypt ignores input beyond 72 bytes
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Tests use 4 to keep
            hashing fast; production reads ``password_hash_rounds``.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Return the bcrypt hash of ``password``.

        Raises
        ------
        WeakPasswordError
            If the password is empty, too short or too long for bcrypt.
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def validate_strength(self, password: str) -> None:
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)
