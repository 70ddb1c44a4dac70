"""Preference Lists — pure operations over the id lists stored on a preferences record.

Invariants:
    - Inputs are never mutated; every function returns a new list
    - Order of first appearance is preserved (lists are ordered sets)
    - Removing an absent id is a no-op, adding a present id is a no-op

Design Decisions:
    - Pure functions, not ORM methods: JSON columns only detect changes on
      reassignment, so callers always assign the returned list
"""

from collections.abc import Iterable

from metro_guide.core.domain_types import DEFAULT_LANGUAGE, SessionToken


def unique_ids(ids: Iterable[int]) -> list[int]:
    """Drop duplicates, keeping the first occurrence of each id."""
    seen: set[int] = set()
    result = []
    for i in ids:
        if i not in seen:
            seen.add(i)
            result.append(i)
    return result


def with_id(ids: list[int] | None, target: int) -> list[int]:
    """Append target unless already present."""
    current = list(ids or [])
    if target in current:
        return current
    return current + [target]


def without_id(ids: list[int] | None, target: int) -> list[int]:
    return [i for i in (ids or []) if i != target]


def default_preferences(session_id: SessionToken) -> dict:
    """Shape reported for a session that has never written preferences."""
    return {
        "session_id": session_id,
        "preferred_categories": [],
        "visited_stations": [],
        "favorite_stations": [],
        "language": DEFAULT_LANGUAGE.value,
    }
