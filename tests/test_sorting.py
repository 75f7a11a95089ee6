"""Tests for sort toggling and the sorted view."""

from reflex_aria_grid.polars_utils import cells_to_frame, frame_to_cells
from reflex_aria_grid.sorting import SortState, sorted_view, toggle_sort


def _frame(rows):
    return cells_to_frame(rows, list(range(len(rows))), len(rows[0]) if rows else 0)


def test_toggle_cycle_never_returns_to_none() -> None:
    state = toggle_sort(SortState(), 0)
    assert state == SortState(0, "ascending")
    state = toggle_sort(state, 0)
    assert state == SortState(0, "descending")
    state = toggle_sort(state, 0)
    assert state == SortState(0, "ascending")


def test_toggle_other_column_starts_ascending() -> None:
    state = toggle_sort(SortState(0, "descending"), 1)
    assert state == SortState(1, "ascending")


def test_two_row_example() -> None:
    frame = _frame([["b"], ["a"]])
    state = toggle_sort(SortState(), 0)
    assert frame_to_cells(sorted_view(frame, *state)) == [["a"], ["b"]]
    state = toggle_sort(state, 0)
    assert frame_to_cells(sorted_view(frame, *state)) == [["b"], ["a"]]


def test_case_insensitive() -> None:
    frame = _frame([["banana"], ["Apple"], ["cherry"]])
    assert frame_to_cells(sorted_view(frame, 0, "ascending")) == [["Apple"], ["banana"], ["cherry"]]


def test_ties_keep_original_order() -> None:
    frame = _frame([["x", "1"], ["a", "2"], ["X", "3"], ["a", "4"]])
    ascending = frame_to_cells(sorted_view(frame, 0, "ascending"))
    assert [row[1] for row in ascending] == ["2", "4", "1", "3"]
    descending = frame_to_cells(sorted_view(frame, 0, "descending"))
    assert [row[1] for row in descending] == ["1", "3", "2", "4"]


def test_idempotent() -> None:
    frame = _frame([["c"], ["a"], ["B"], ["a"]])
    once = sorted_view(frame, 0, "descending")
    twice = sorted_view(once, 0, "descending")
    assert once.equals(twice)


def test_nothing_to_sort_returns_same_frame() -> None:
    frame = _frame([["b"], ["a"]])
    assert sorted_view(frame, None, "ascending") is frame
    assert sorted_view(frame, 0, "none") is frame
    assert sorted_view(frame, 5, "ascending") is frame
