"""Catalog Schemas — response shapes for lines, stations, categories, attractions.

Invariants:
    - Every schema reads ORM objects directly (from_attributes)
    - Station responses embed their line and attractions; attractions embed a
      station (with line, without attractions) and their category
    - Foreign-key ids stay present next to the embedded objects

Design Decisions:
    - StationSummary has no attractions field: the attraction → station → attractions
      cycle stops there, and reading it never touches the lazy="raise" relationship
    - rating is Decimal so JSON output keeps the one-decimal string form ("4.8")
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for all wire models: camelCase aliases, ORM-readable."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MetroLineOut(ApiModel):
    id: int
    name: str
    name_ar: str
    color: str
    line_code: str


class CategoryOut(ApiModel):
    id: int
    name: str
    name_ar: str
    icon: str
    color: str


class StationSummary(ApiModel):
    """Station with its line embedded."""
    id: int
    name: str
    name_ar: str
    line_id: int | None = None
    latitude: float | None = None
    longitude: float | None = None
    walking_time: int | None = None
    popularity_score: int = 0
    is_popular: bool = False
    is_trending: bool = False
    line: MetroLineOut | None = None


class AttractionWithDetails(ApiModel):
    id: int
    name: str
    name_ar: str
    description: str | None = None
    description_ar: str | None = None
    station_id: int
    category_id: int
    rating: Decimal | None = None
    walking_time_from_station: int | None = None
    image_url: str | None = None
    video_url: str | None = None
    video_duration: str | None = None
    is_recommended: bool = False
    station: StationSummary | None = None
    category: CategoryOut | None = None


class StationWithLine(StationSummary):
    """Station with its line and the attractions around it."""
    attractions: list[AttractionWithDetails] = []
