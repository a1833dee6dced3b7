"""SQLAlchemy model for tool materials."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from makemeacube.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from makemeacube.infrastructure.persistence.sqlalchemy.models.maker_tool_model import (  # NOQA: E501
        MakerToolModel,
    )


class MaterialModel(Base, TimestampMixin):
    __tablename__ = "materials"
    # Replaced materials always get fresh ids, so SQLite must not reuse rowids
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tool_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("maker_tools.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    material_type: Mapped[str] = mapped_column(String(20), nullable=False)
    colors: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    tool: Mapped[MakerToolModel] = relationship(
        "MakerToolModel",
        back_populates="materials",
    )

    def __repr__(self) -> str:
        return (
            f"<MaterialModel(id={self.id}, tool_id={self.tool_id}, "
            f"type={self.material_type})>"
        )
