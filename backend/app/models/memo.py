"""
MemoBoard Backend — Memo SQLAlchemy Model
===========================================

What:  ORM model representing the `memo` table.
How:   `fid` is the integer identity that selects insert vs update on save;
       title and content are the only mutable columns.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Memo(Base):
    """A free-form note with an optional title."""

    __tablename__ = "memo"

    fid: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Memo identifier, assigned on insert",
    )

    ftitle: Mapped[str | None] = mapped_column(
        String(200),
        nullable=True,
        default="",
        comment="Memo title",
    )

    fcontent: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default="",
        comment="Memo body",
    )

    fcreated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this memo was created (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Memo(fid={self.fid}, ftitle='{self.ftitle}')>"
