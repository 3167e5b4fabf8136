"""Saved copies of a user's resume draft.

Each row stores the whole resume aggregate as an opaque JSON document plus
a display name, so loading a snapshot restores the draft exactly.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_builder.data.db import Base

if TYPE_CHECKING:
    from resume_builder.data.models.user import User


class ResumeSnapshot(Base):
    """A named, serialized resume belonging to one user.

    Attributes:
        id: Auto-incrementing primary key.
        user_id: Foreign key to users table.
        name: Display name chosen when saving.
        data: JSON-serialized resume aggregate.
        created_at: UTC timestamp when the snapshot was saved.
    """

    __tablename__ = "resume_snapshots"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="My Resume")
    data: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="snapshots")
