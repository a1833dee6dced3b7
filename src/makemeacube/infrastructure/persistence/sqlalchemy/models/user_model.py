"""SQLAlchemy model for the User aggregate root."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from makemeacube.domain.user.value_objects.email import MAX_EMAIL_LENGTH
from makemeacube.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from makemeacube.infrastructure.persistence.sqlalchemy.models.address_model import (  # NOQA: E501
        AddressModel,
    )
    from makemeacube.infrastructure.persistence.sqlalchemy.models.maker_tool_model import (  # NOQA: E501
        MakerToolModel,
    )


class UserModel(Base, TimestampMixin):
    """
    Persisted User aggregate.

    Addresses and maker tools are owned collections: removing one from the
    collection deletes its row, deleting the user deletes everything.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        unique=True,
        nullable=False,
        index=True,
    )
    pseudo: Mapped[str] = mapped_column(String(100), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    registration_provider: Mapped[str] = mapped_column(String(20), nullable=False)
    registration_status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
    )

    # Profile
    first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)

    # Maker profile
    is_maker: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    maker_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    addresses: Mapped[list[AddressModel]] = relationship(
        "AddressModel",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="AddressModel.id",
    )
    maker_tools: Mapped[list[MakerToolModel]] = relationship(
        "MakerToolModel",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="MakerToolModel.id",
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
