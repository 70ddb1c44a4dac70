"""UserPreferences ORM — per-visitor state keyed by an opaque session token.

Invariants:
    - session_id is unique: at most one record per visitor
    - List columns hold ordered, duplicate-free integer ids
    - updated_at is bumped on every write

Design Decisions:
    - JSON columns for the id lists: portable across PostgreSQL and SQLite,
      and the lists are always read and written whole
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from metro_guide.db.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class UserPreferences(Base):
    """Preferences record for one anonymous session."""
    __tablename__ = "user_preferences"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_id: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True,
    )
    preferred_categories: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    visited_stations: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    favorite_stations: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    language: Mapped[str] = mapped_column(
        String(10), nullable=False, default="ar",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )

    def __repr__(self) -> str:
        return f"<UserPreferences(session_id={self.session_id}, language={self.language})>"
