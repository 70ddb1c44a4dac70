"""Preferences Schemas — partial update body and stored/default response shape.

Invariants:
    - PreferencesUpdate is partial: only fields present in the body are applied
    - Id lists are de-duplicated (first occurrence wins) and ids must be positive
    - language is one of the supported Language values

Design Decisions:
    - Unknown fields ignored (sessionId in a body never overrides the header)
    - updatedAt omitted from the default shape via response_model_exclude_none
"""

from datetime import datetime

from pydantic import Field, field_validator

from metro_guide.core.domain_types import Language
from metro_guide.core.preference_lists import unique_ids
from metro_guide.schemas.catalog import ApiModel


class PreferencesUpdate(ApiModel):
    """Partial preferences write. Omitted fields keep their stored value."""
    preferred_categories: list[int] | None = None
    visited_stations: list[int] | None = None
    favorite_stations: list[int] | None = None
    language: Language | None = None

    @field_validator(
        "preferred_categories", "visited_stations", "favorite_stations",
    )
    @classmethod
    def dedupe_positive_ids(cls, v: list[int] | None) -> list[int] | None:
        if v is None:
            return v
        if any(i <= 0 for i in v):
            raise ValueError("ids must be positive integers")
        return unique_ids(v)

    def changes(self) -> dict:
        """Fields explicitly supplied with a non-null value, as column values."""
        data = self.model_dump(exclude_unset=True, exclude_none=True)
        if "language" in data:
            data["language"] = Language(data["language"]).value
        return data


class PreferencesOut(ApiModel):
    session_id: str
    preferred_categories: list[int] = Field(default_factory=list)
    visited_stations: list[int] = Field(default_factory=list)
    favorite_stations: list[int] = Field(default_factory=list)
    language: str = Language.AR.value
    updated_at: datetime | None = None


class AckResponse(ApiModel):
    message: str
