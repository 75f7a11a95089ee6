"""Keyboard navigation over the grid: (cell, key, bounds, page length) -> next cell."""

from reflex_aria_grid.models import Cell, GridBounds

# Keys honored when focus sits on the row container (aria-roving selection).
ROW_KEYS: frozenset[str] = frozenset({"ArrowUp", "ArrowDown", "PageUp", "PageDown"})

NAVIGATION_KEYS: frozenset[str] = ROW_KEYS | {"ArrowLeft", "ArrowRight", "Home", "End"}


def _clamp(value: int, upper: int) -> int:
    """Clamp *value* into ``[0, upper]``; an empty range collapses to 0."""
    return max(0, min(upper, value))


def next_cell(
    cell: Cell,
    bounds: GridBounds,
    key: str,
    page_length: int,
    *,
    rows_only: bool = False,
) -> tuple[Cell, bool]:
    """Return the cell *key* moves to from *cell*, and whether it moved.

    Args:
        cell: The current active cell.
        bounds: Row count and highest column index of the rendered grid.
        key: A DOM ``KeyboardEvent.key`` value.  Keys outside
            :data:`NAVIGATION_KEYS` leave the cell untouched.
        page_length: Rows moved by PageUp / PageDown.
        rows_only: Only honor vertical keys (ArrowUp/Down, PageUp/Down).
            Used when a row, not a cell, holds focus.

    Returns:
        A ``(new_cell, changed)`` tuple.  Every coordinate is clamped to
        the bounds, so out-of-range requests never fail.
    """
    if key not in (ROW_KEYS if rows_only else NAVIGATION_KEYS):
        return cell, False

    column, row = cell
    last_row = bounds.row_count - 1
    last_column = bounds.max_col_index

    if key == "ArrowUp":
        row = _clamp(row - 1, last_row)
    elif key == "ArrowDown":
        row = _clamp(row + 1, last_row)
    elif key == "ArrowLeft":
        column = _clamp(column - 1, last_column)
    elif key == "ArrowRight":
        column = _clamp(column + 1, last_column)
    elif key == "Home":
        column = 0
    elif key == "End":
        column = max(0, last_column)
    elif key == "PageUp":
        row = _clamp(row - page_length, last_row)
    else:  # PageDown
        row = _clamp(row + page_length, last_row)

    moved = Cell(column, row)
    return moved, moved != cell
