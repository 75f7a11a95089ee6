"""Single-column, case-insensitive sorting of the grid frame."""

from typing import NamedTuple

import polars as pl

from reflex_aria_grid.models import SortDirection
from reflex_aria_grid.polars_utils import data_fields


class SortState(NamedTuple):
    """Which column is sorted, and in which direction."""

    column: int | None = None
    direction: SortDirection = "none"


def toggle_sort(state: SortState, column: int) -> SortState:
    """Return the sort state after activating the header of *column*.

    Re-activating the sorted column flips ascending <-> descending (it
    never goes back to ``"none"``); any other column starts ascending.
    """
    if column == state.column:
        direction: SortDirection = "ascending" if state.direction == "descending" else "descending"
        return SortState(column, direction)
    return SortState(column, "ascending")


def sorted_view(
    frame: pl.DataFrame,
    column: int | None,
    direction: SortDirection,
) -> pl.DataFrame:
    """Sort *frame* by the lower-cased strings of data column *column*.

    Ties keep their original relative order in both directions, so
    re-applying the same sort returns the same order.

    Args:
        frame: A grid frame (see :func:`~reflex_aria_grid.polars_utils.cells_to_frame`).
        column: Data column index, or ``None`` for no sort.
        direction: ``"ascending"``, ``"descending"`` or ``"none"``.

    Returns:
        *frame* itself when there is nothing to sort by (no column, an
        unknown column, or direction ``"none"``), otherwise a new
        ``pl.DataFrame``.
    """
    if column is None or direction == "none":
        return frame

    fields = data_fields(frame)
    if not 0 <= column < len(fields):
        return frame

    return frame.sort(
        pl.col(fields[column]).str.to_lowercase(),
        descending=direction == "descending",
        maintain_order=True,
    )
