"""Tests for the selection tracker."""

from reflex_aria_grid.selection import SelectionTracker


def test_select_all_then_deselect_one() -> None:
    tracker = SelectionTracker()
    tracker.select_all([0, 1, 2], True)
    assert tracker.aggregate_state(3) is True
    tracker.set_row_selected(1, False)
    assert tracker.aggregate_state(3) == "indeterminate"
    tracker.select_all([0, 1, 2], False)
    assert tracker.aggregate_state(3) is False


def test_count_only_changes_on_actual_change() -> None:
    tracker = SelectionTracker()
    assert tracker.set_row_selected(4, True)
    assert not tracker.set_row_selected(4, True)
    assert tracker.count == 1
    assert not tracker.set_row_selected(7, False)
    assert tracker.count == 1


def test_count_matches_flags() -> None:
    tracker = SelectionTracker()
    for row_id in (1, 2, 3):
        tracker.set_row_selected(row_id, True)
    tracker.set_row_selected(2, False)
    assert tracker.count == len(tracker.selected_ids()) == 2


def test_rebuild_drops_missing_rows() -> None:
    tracker = SelectionTracker()
    tracker.select_all([0, 1, 2], True)
    tracker.rebuild([1, 5])
    assert tracker.selected_ids() == [1]
    assert tracker.count == 1
    assert not tracker.is_selected(0)


def test_empty_grid_is_unselected() -> None:
    assert SelectionTracker().aggregate_state(0) is False
