"""SQLAlchemy model for user addresses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from makemeacube.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from makemeacube.infrastructure.persistence.sqlalchemy.models.user_model import (
        UserModel,
    )


class AddressModel(Base, TimestampMixin):
    __tablename__ = "user_addresses"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)

    user: Mapped[UserModel] = relationship("UserModel", back_populates="addresses")

    def __repr__(self) -> str:
        return f"<AddressModel(id={self.id}, user_id={self.user_id}, city={self.city})>"
