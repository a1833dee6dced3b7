"""Declarative base shared by the MakeMeACube tables."""

from datetime import datetime
from typing import Annotated

from sqlalchemy import DateTime, MetaData
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from makemeacube.domain.shared.time import utc_now

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

UtcTimestamp = Annotated[
    datetime,
    mapped_column(DateTime(timezone=True), default=utc_now, nullable=False),
]


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class TimestampMixin:
    """``updated_at`` is refreshed whenever the row itself is flushed."""

    created_at: Mapped[UtcTimestamp] = mapped_column()
    updated_at: Mapped[UtcTimestamp] = mapped_column(onupdate=utc_now)
