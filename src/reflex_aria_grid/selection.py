"""Row selection bookkeeping keyed by row identity."""

from collections.abc import Iterable

from reflex_aria_grid.models import SelectionState


class SelectionTracker:
    """Holds ``row_id -> selected`` and the number of selected rows.

    Rows are keyed by their synthetic identity rather than their position,
    so a selection survives re-sorting.  :meth:`rebuild` drops the entries
    of rows that disappeared in a data reload.
    """

    def __init__(self) -> None:
        self._selected: dict[int, bool] = {}
        self.count: int = 0

    def is_selected(self, row_id: int) -> bool:
        return self._selected.get(row_id, False)

    def selected_ids(self) -> list[int]:
        return [row_id for row_id, selected in self._selected.items() if selected]

    def set_row_selected(self, row_id: int, selected: bool) -> bool:
        """Flag one row and adjust the count; returns whether anything changed."""
        if self.is_selected(row_id) == selected:
            return False
        self._selected[row_id] = selected
        self.count += 1 if selected else -1
        return True

    def select_all(self, row_ids: Iterable[int], selected: bool) -> None:
        """Flag every row in *row_ids*; the count becomes all or nothing."""
        row_ids = list(row_ids)
        for row_id in row_ids:
            self._selected[row_id] = selected
        self.count = len(row_ids) if selected else 0

    def aggregate_state(self, row_count: int) -> SelectionState:
        """Tri-state for the header checkbox: ``False``, ``True`` or ``"indeterminate"``."""
        if self.count == 0:
            return False
        if self.count == row_count:
            return True
        return "indeterminate"

    def rebuild(self, row_ids: Iterable[int]) -> None:
        """Keep only the rows in *row_ids* and recount."""
        kept = {row_id: self._selected[row_id] for row_id in row_ids if row_id in self._selected}
        self._selected = kept
        self.count = sum(1 for selected in kept.values() if selected)
