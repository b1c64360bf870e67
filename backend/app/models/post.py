"""
MemoBoard Backend — Post SQLAlchemy Model
===========================================

What:  ORM model representing the `tboard` table (board posts).
How:   Inherits from the shared DeclarativeBase; the query building blocks
       work on `Post.__table__` with Core statements.

Table Design:
    - br_seq: integer identity, assigned by the database on insert and
      returned with INSERT ... RETURNING
    - br_cd: category code; posts of every board share this table
    - br_title / br_content / br_file: mutable through updates
    - br_reg_id: author, filled with the configured default when omitted
    - br_reg_dt: creation time, set once by the server

    Index on (br_cd, br_seq) serves the per-category newest-first listing.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Post(Base):
    """A single post on one of the boards."""

    __tablename__ = "tboard"

    br_seq: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Post sequence number, assigned on insert",
    )

    br_cd: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="Board category code (B1, B2, ...)",
    )

    br_title: Mapped[str | None] = mapped_column(
        String(200),
        nullable=True,
        default="",
        comment="Post title",
    )

    br_content: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default="",
        comment="Post body",
    )

    br_file: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        default="",
        comment="Attachment reference",
    )

    br_reg_id: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        comment="Author identifier",
    )

    br_reg_dt: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this post was created (UTC)",
    )

    __table_args__ = (
        Index("idx_tboard_cd_seq", "br_cd", "br_seq"),
    )

    def __repr__(self) -> str:
        return f"<Post(br_seq={self.br_seq}, br_cd='{self.br_cd}')>"
