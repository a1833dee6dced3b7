"""SQLAlchemy models for maker tools.

All tool kinds share the ``maker_tools`` table (single-table inheritance);
``tool_type`` selects the mapped class. Kind-specific columns are nullable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from makemeacube.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from makemeacube.infrastructure.persistence.sqlalchemy.models.material_model import (  # NOQA: E501
        MaterialModel,
    )
    from makemeacube.infrastructure.persistence.sqlalchemy.models.user_model import (
        UserModel,
    )


class MakerToolModel(Base, TimestampMixin):
    __tablename__ = "maker_tools"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tool_type: Mapped[str] = mapped_column(String(32), nullable=False)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    reference: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    user: Mapped[UserModel] = relationship("UserModel", back_populates="maker_tools")
    materials: Mapped[list[MaterialModel]] = relationship(
        "MaterialModel",
        back_populates="tool",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="MaterialModel.id",
    )

    __mapper_args__ = {
        "polymorphic_on": "tool_type",
        "polymorphic_identity": "maker_tool",
    }

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}(id={self.id}, user_id={self.user_id}, "
            f"name={self.name})>"
        )


class Printer3DModel(MakerToolModel):
    """3D printer specification columns."""

    volume_x: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    volume_y: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    volume_z: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    accuracy_x: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    accuracy_y: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    accuracy_z: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    layer_thickness: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    printer_type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    __mapper_args__ = {
        "polymorphic_identity": "printer_3d",
        # Load the printer columns with every tool query (no lazy column IO)
        "polymorphic_load": "inline",
    }
