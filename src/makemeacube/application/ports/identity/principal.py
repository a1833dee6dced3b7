"""Principal - the application's view of the authenticated caller.

Token verification happens upstream; this port only carries what was
extracted from an already-verified credential.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Principal:
    """Immutable representation of the authenticated caller."""

    user_id: Optional[int]
    email: str

    def __str__(self) -> str:
        return f"Principal({self.email})"

    def __repr__(self) -> str:
        return f"Principal(user_id={self.user_id}, email={self.email!r})"
