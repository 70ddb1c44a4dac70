"""Tests for preference list helpers — pure, no IO."""

from metro_guide.core.preference_lists import (
    default_preferences, unique_ids, with_id, without_id,
)


def test_with_id_appends_new_id():
    assert with_id([1, 2], 3) == [1, 2, 3]


def test_with_id_keeps_existing_list_unchanged():
    ids = [4, 5]
    assert with_id(ids, 4) == [4, 5]


def test_with_id_does_not_mutate_input():
    ids = [1]
    result = with_id(ids, 2)
    assert ids == [1]
    assert result is not ids


def test_with_id_handles_none():
    assert with_id(None, 9) == [9]


def test_without_id_removes_every_occurrence():
    assert without_id([1, 2, 1, 3], 1) == [2, 3]


def test_without_id_absent_is_noop():
    assert without_id([1, 2], 7) == [1, 2]
    assert without_id(None, 7) == []


def test_unique_ids_keeps_first_occurrence_order():
    assert unique_ids([3, 1, 3, 2, 1]) == [3, 1, 2]


def test_default_preferences_shape():
    assert default_preferences("tok") == {
        "session_id": "tok",
        "preferred_categories": [],
        "visited_stations": [],
        "favorite_stations": [],
        "language": "ar",
    }


def test_default_preferences_lists_are_independent():
    a = default_preferences("a")
    b = default_preferences("b")
    a["favorite_stations"].append(1)
    assert b["favorite_stations"] == []
