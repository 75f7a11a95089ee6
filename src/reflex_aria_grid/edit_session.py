"""Active cell, edit mode and the deferred focus effects requested by transitions.

Focus can only be moved once the element for the new active cell exists,
that is after the host has rendered the transition.  Transitions therefore
only *request* focus (``pending_focus``) or text selection
(``pending_text_select``); the host calls :meth:`EditSession.drain_effects`
after its render settles, applies the returned effects and thereby clears
the requests.  Draining with nothing pending returns an empty list.
"""

from typing import Literal, NamedTuple

from reflex_aria_grid.events import EditCellEvent
from reflex_aria_grid.models import Cell, GridConfig

EffectKind = Literal["focus", "select_text"]


class FocusEffect(NamedTuple):
    """A DOM side effect for the host to run against the active cell's target."""

    kind: EffectKind
    cell: Cell


class EditSession:
    """Roving focus point and edit-mode state machine for one grid.

    ``suppress_save`` is a one-shot guard: set by Escape (:meth:`cancel`),
    consumed by the next :meth:`commit`, and cleared when a new edit starts.
    """

    def __init__(self, config: GridConfig) -> None:
        self.config = config
        self.active_cell: Cell = Cell(0, 0)
        self.is_editing: bool = False
        self.pending_focus: bool = False
        self.pending_text_select: bool = False
        self.suppress_save: bool = False

    @property
    def can_edit(self) -> bool:
        return self.config.editable or self.config.simple_editable

    def move_active_cell(self, cell: Cell) -> bool:
        """Make *cell* active and request focus for it; returns whether it moved."""
        if cell == self.active_cell:
            return False
        self.active_cell = cell
        self.pending_focus = True
        return True

    def set_active_cell(self, cell: Cell) -> None:
        """Make *cell* active without a focus request (the browser already focused it)."""
        self.active_cell = cell

    def enter_edit(self, with_focus: bool) -> bool:
        if not self.can_edit:
            return False
        self.is_editing = True
        self.pending_focus = with_focus
        self.pending_text_select = with_focus
        self.suppress_save = False
        return True

    def exit_edit(self, with_focus: bool) -> bool:
        if not self.can_edit:
            return False
        self.is_editing = False
        self.pending_focus = with_focus
        self.pending_text_select = False
        return True

    def commit(self, column: int, row: int, value: str) -> EditCellEvent | None:
        """Return the edit to emit, or ``None`` when the suppress guard swallows it."""
        if self.suppress_save:
            self.suppress_save = False
            return None
        return EditCellEvent(column=column, row=row, value=value)

    def cancel(self) -> None:
        """Leave edit mode and discard whatever the next commit carries."""
        self.suppress_save = True
        self.exit_edit(True)

    @property
    def has_pending_effects(self) -> bool:
        return self.pending_focus or self.pending_text_select

    def drain_effects(self) -> list[FocusEffect]:
        """Return the requested effects for the active cell and clear the requests."""
        effects: list[FocusEffect] = []
        if self.pending_focus:
            effects.append(FocusEffect("focus", self.active_cell))
            if self.pending_text_select:
                effects.append(FocusEffect("select_text", self.active_cell))
        self.pending_focus = False
        self.pending_text_select = False
        return effects
