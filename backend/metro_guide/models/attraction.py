"""Attraction ORM — a point of interest near one station, in one category.

Invariants:
    - station_id and category_id reference existing rows
    - rating is a one-decimal score (e.g. 4.8), serialized as a string on the wire

Design Decisions:
    - station and category are lazy="joined": every attraction response embeds
      both, and Station.line is itself joined, so one query yields the full shape
"""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import String, Integer, Text, Numeric, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from metro_guide.db.base import Base

if TYPE_CHECKING:
    from metro_guide.models.station import Station
    from metro_guide.models.category import Category


class Attraction(Base):
    """Attraction reference data."""
    __tablename__ = "attractions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    name_ar: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    station_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("stations.id"), nullable=False, index=True,
    )
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id"), nullable=False, index=True,
    )
    rating: Mapped[Decimal | None] = mapped_column(Numeric(2, 1), nullable=True)
    walking_time_from_station: Mapped[int | None] = mapped_column(Integer, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    video_duration: Mapped[str | None] = mapped_column(String(10), nullable=True)
    is_recommended: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, index=True,
    )

    # Relationships
    station: Mapped["Station"] = relationship(
        "Station", back_populates="attractions", lazy="joined",
    )
    category: Mapped["Category"] = relationship("Category", lazy="joined")

    def __repr__(self) -> str:
        return f"<Attraction(id={self.id}, name={self.name}, rating={self.rating})>"
