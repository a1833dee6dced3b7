"""SQLAlchemy implementation of the user domain repositories."""

from makemeacube.infrastructure.persistence.sqlalchemy.database import (
    get_engine,
    get_session_maker,
    session_scope,
)
from makemeacube.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
    reset_tables,
)

__all__ = [
    "create_tables",
    "drop_tables",
    "get_engine",
    "get_session_maker",
    "reset_tables",
    "session_scope",
]
