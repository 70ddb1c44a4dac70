"""Station ORM — a stop on a metro line with popularity and trending signals.

Invariants:
    - line_id, when set, references an existing metro_lines row
    - popularity_score drives default ordering (desc), name breaks ties (asc)

Design Decisions:
    - line is lazy="joined": every station response embeds its line, so the
      LEFT OUTER JOIN is always wanted
    - attractions is lazy="raise": callers must request it with an explicit
      loader option so page-sized fetches stay batched
"""

from typing import TYPE_CHECKING

from sqlalchemy import String, Integer, Float, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from metro_guide.db.base import Base

if TYPE_CHECKING:
    from metro_guide.models.metro_line import MetroLine
    from metro_guide.models.attraction import Attraction


class Station(Base):
    """Station reference data."""
    __tablename__ = "stations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    name_ar: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    line_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("metro_lines.id"), nullable=True, index=True,
    )
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    walking_time: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    popularity_score: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    is_popular: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_trending: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    line: Mapped["MetroLine | None"] = relationship("MetroLine", lazy="joined")
    attractions: Mapped[list["Attraction"]] = relationship(
        "Attraction", back_populates="station", lazy="raise",
        order_by="Attraction.id",
    )

    def __repr__(self) -> str:
        return f"<Station(id={self.id}, name={self.name})>"
