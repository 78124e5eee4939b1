"""Tests for comparison selection."""

from lensbase.domain.seed import seed_photos
from lensbase.services.compare import ComparisonSelector, CompareViewState


def test_toggle_selects_and_deselects() -> None:
    selector = ComparisonSelector()

    assert selector.toggle("A") == ["A"]
    assert selector.toggle("B") == ["A", "B"]
    assert selector.toggle("A") == ["B"]


def test_fourth_selection_replaces_second_entry() -> None:
    selector = ComparisonSelector()
    for photo_id in ["A", "B", "C"]:
        selector.toggle(photo_id)

    assert selector.toggle("D") == ["A", "D", "C"]


def test_selection_never_exceeds_three() -> None:
    selector = ComparisonSelector()
    for photo_id in ["A", "B", "C", "D", "E", "F"]:
        selector.toggle(photo_id)

    assert len(selector.selected_ids) == 3
    assert selector.selected_ids == ["A", "F", "C"]


def test_selected_photos_follow_collection_order() -> None:
    selector = ComparisonSelector()
    for photo_id in ["3", "1", "gone"]:
        selector.toggle(photo_id)

    result = selector.selected_photos(seed_photos())

    assert [photo.id for photo in result] == ["1", "3"]


def test_clear() -> None:
    selector = ComparisonSelector(selected_ids=["A"])
    selector.clear()

    assert selector.selected_ids == []
    assert not selector.is_selected("A")


def test_zoom_is_clamped() -> None:
    state = CompareViewState()

    assert state.adjust_zoom(-1) == 1.0
    assert state.adjust_zoom(0.5) == 1.5
    assert state.adjust_zoom(10) == 5.0


def test_toggle_metadata() -> None:
    state = CompareViewState()

    assert state.toggle_metadata() is False
    assert state.toggle_metadata() is True
