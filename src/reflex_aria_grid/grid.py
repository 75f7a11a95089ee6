"""Grid model: owns the data, the columns and the sorted view, and routes host events.

:class:`AriaGrid` is what a host talks to.  The host feeds it raw data and
DOM-level events (keydown, click, focus, blur, input changes), renders
from its state, and after every render calls :meth:`AriaGrid.drain_effects`
to move real focus.  Results leave through :attr:`AriaGrid.events`::

    grid = AriaGrid(cells, columns, GridConfig(grid_type="grid"))
    grid.events.subscribe(EditCellEvent, save_to_database)
    grid.on_cell_keydown("ArrowDown")
    for effect in grid.drain_effects():
        ...  # focus effect.target.element_id

All row positions taken or reported here are positions in the *sorted*
view.  Cell columns count the checkbox column (when present) as column 0;
header operations (sort, filter) and emitted edits use data column indices.
"""

from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any, Literal, NamedTuple

import polars as pl

from reflex_aria_grid.edit_session import EditSession
from reflex_aria_grid.events import (
    EditCellEvent,
    FilterEvent,
    GridEventBus,
    RowSelectEvent,
)
from reflex_aria_grid.filters import FilterRegistry
from reflex_aria_grid.identity import IdentityArena
from reflex_aria_grid.models import (
    Cell,
    GridBounds,
    GridColumn,
    GridConfig,
    SelectionState,
)
from reflex_aria_grid.navigation import next_cell
from reflex_aria_grid.polars_utils import (
    ROW_ID_FIELD,
    cell_field,
    cells_to_frame,
    frame_row_ids,
    frame_to_cells,
)
from reflex_aria_grid.selection import SelectionTracker
from reflex_aria_grid.sorting import SortState, sorted_view, toggle_sort

FocusTargetKind = Literal["row", "checkbox", "action", "input", "edit_button", "cell"]
CellRenderer = Callable[[str, int, int], Any]


class FocusTarget(NamedTuple):
    """The element that should hold focus for a cell, with its DOM id."""

    kind: FocusTargetKind
    row: int
    column: int
    element_id: str


class ResolvedEffect(NamedTuple):
    """A pending focus effect bound to the element it applies to."""

    kind: Literal["focus", "select_text"]
    target: FocusTarget


class ActionControl(NamedTuple):
    """Built-in button rendered in place of an actions column's content."""

    label: str
    element_id: str
    aria_labelledby: str
    tab_index: int | None


def cell_dom_id(row: int, column: int) -> str:
    return f"cell-{row}-{column}"


class AriaGrid:
    """Interaction state machine for an accessible, editable data grid.

    Args:
        cells: Ordered rows of string cells.  Row objects are the row
            identities: passing the same list objects again on reload keeps
            their selection.
        columns: Column descriptors, one per data column.
        config: Behavior switches; read live, so changing a flag takes
            effect on the next event.
        render_custom_cell: Optional ``(content, column, row) -> content``
            renderer for non-actions columns.
    """

    def __init__(
        self,
        cells: Sequence[Sequence[Any]] | None = None,
        columns: Sequence[GridColumn] | None = None,
        config: GridConfig | None = None,
        *,
        render_custom_cell: CellRenderer | None = None,
    ) -> None:
        self.config = config or GridConfig()
        self.render_custom_cell = render_custom_cell
        self.events = GridEventBus()
        self.session = EditSession(self.config)
        self.selection = SelectionTracker()
        self.filters = FilterRegistry()
        self.sort_state = SortState()

        self._row_arena = IdentityArena()
        self._column_arena = IdentityArena()
        self._rows: list[Sequence[Any]] = []
        self._row_ids: list[int] = []
        self._rows_by_id: dict[int, Sequence[Any]] = {}
        self._columns: list[GridColumn] = []
        self._column_ids: list[int] = []
        self._frame: pl.DataFrame = cells_to_frame([], [], 0)
        self._view: pl.DataFrame = self._frame
        self._view_ids: list[int] = []
        self._view_cells: list[list[str]] = []
        # One-shot: the focus event following a mouse-down belongs to the click.
        self._mouse_down = False

        self.set_columns(columns or [])
        self.set_cells(cells or [])

    def _log(self, message: str) -> None:
        if self.config.debug_log:
            print(f"[AriaGrid] {message}")

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def set_cells(self, cells: Sequence[Sequence[Any]]) -> None:
        """Replace the data wholesale and recompute the sorted view.

        Rows not passed again as the same object lose their selection.
        The active cell is left alone; see :meth:`clamp_active_cell`.
        """
        self._rows = list(cells)
        self._row_ids = self._row_arena.assign(self._rows)
        self._rows_by_id = dict(zip(self._row_ids, self._rows))
        self.selection.rebuild(self._row_ids)
        self._rebuild_frame()
        self._log(f"data loaded: {len(self._rows)} rows, {self.selection.count} selected")

    def set_columns(self, columns: Sequence[GridColumn]) -> None:
        """Replace the column descriptors; filter text of dropped columns is discarded."""
        self._columns = list(columns)
        self._column_ids = self._column_arena.assign(self._columns)
        self.filters.rebuild(self._column_ids)
        self._rebuild_frame()

    def update_cell(self, row: int, column: int, value: str) -> bool:
        """Write an edited value back without changing the row's identity.

        Mutable row objects are updated in place as well, so the host's
        data stays in step.

        Args:
            row: Row position in the sorted view.
            column: Data column index.
            value: The new cell text.
        """
        if not 0 <= row < self.row_count or not 0 <= column < len(self._columns):
            return False

        row_id = self._view_ids[row]
        row_data = self._rows_by_id[row_id]
        if isinstance(row_data, list):
            row_data.extend([""] * (column + 1 - len(row_data)))
            row_data[column] = value

        name = cell_field(column)
        self._frame = self._frame.with_columns(
            pl.when(pl.col(ROW_ID_FIELD) == row_id)
            .then(pl.lit(value))
            .otherwise(pl.col(name))
            .alias(name)
        )
        self._refresh_view()
        return True

    def _rebuild_frame(self) -> None:
        self._frame = cells_to_frame(self._rows, self._row_ids, len(self._columns))
        self._refresh_view()

    def _refresh_view(self) -> None:
        self._view = sorted_view(self._frame, self.sort_state.column, self.sort_state.direction)
        self._view_ids = frame_row_ids(self._view)
        self._view_cells = frame_to_cells(self._view)

    @property
    def columns(self) -> list[GridColumn]:
        return list(self._columns)

    @property
    def rows(self) -> list[Sequence[Any]]:
        """The row objects in data (unsorted) order."""
        return list(self._rows)

    @property
    def frame(self) -> pl.DataFrame:
        """The sorted view as a frame (``__row_id__`` plus ``col_N`` columns)."""
        return self._view

    @property
    def sorted_cells(self) -> list[list[str]]:
        return [list(row) for row in self._view_cells]

    @property
    def sorted_row_ids(self) -> list[int]:
        return list(self._view_ids)

    def row_at(self, row: int) -> Sequence[Any] | None:
        """The row object shown at sorted position *row*."""
        if not 0 <= row < self.row_count:
            return None
        return self._rows_by_id[self._view_ids[row]]

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self._view_ids)

    @property
    def has_checkbox_column(self) -> bool:
        return self.config.row_selection == "checkbox"

    @property
    def column_offset(self) -> int:
        return 1 if self.has_checkbox_column else 0

    @property
    def max_col_index(self) -> int:
        return len(self._columns) - 1 + self.column_offset

    @property
    def bounds(self) -> GridBounds:
        return GridBounds(self.row_count, self.max_col_index)

    def data_column(self, column: int) -> int | None:
        """Data column index for rendered *column*, or ``None`` for the checkbox column."""
        index = column - self.column_offset
        if not 0 <= index < len(self._columns):
            return None
        return index

    def column_at(self, column: int) -> GridColumn | None:
        """Descriptor of rendered *column*, or ``None`` for the checkbox column."""
        index = self.data_column(column)
        return None if index is None else self._columns[index]

    def is_editable_cell(self, cell: Cell) -> bool:
        """Whether *cell* can host an editor: a data cell outside any actions column."""
        column = self.column_at(cell.column)
        return column is not None and not column.actions_column and 0 <= cell.row < self.row_count

    def clamp_active_cell(self) -> bool:
        """Pull the active cell back inside the bounds after a data change."""
        column, row = self.active_cell
        clamped = Cell(
            max(0, min(self.max_col_index, column)),
            max(0, min(self.row_count - 1, row)),
        )
        if clamped == self.active_cell:
            return False
        self.session.set_active_cell(clamped)
        if self.is_editing and not self.is_editable_cell(clamped):
            self.session.exit_edit(False)
        return True

    # ------------------------------------------------------------------
    # Focus and editing
    # ------------------------------------------------------------------

    @property
    def active_cell(self) -> Cell:
        return self.session.active_cell

    @property
    def is_editing(self) -> bool:
        return self.session.is_editing

    def _navigate(self, key: str, rows_only: bool) -> bool:
        cell, changed = next_cell(
            self.active_cell,
            self.bounds,
            key,
            self.config.page_length,
            rows_only=rows_only,
        )
        if changed:
            self.session.move_active_cell(cell)
            self._log(f"{key}: active cell -> {tuple(cell)}")
        return changed

    def _enter_edit(self, with_focus: bool) -> bool:
        if not self.is_editable_cell(self.active_cell):
            return False
        entered = self.session.enter_edit(with_focus)
        if entered:
            self._log(f"edit started at {tuple(self.active_cell)}")
        return entered

    def _commit(self, value: str) -> EditCellEvent | None:
        column = self.data_column(self.active_cell.column)
        row = self.active_cell.row
        if column is None:
            return None

        event = self.session.commit(column, row, value)
        if event is None:
            self._log(f"save suppressed at {tuple(self.active_cell)}")
            return None

        if 0 <= row < self.row_count:
            event = replace(event, row_id=self._view_ids[row])
        self._log(f"edit committed: column={column}, row={row}")
        self.events.emit(event)
        return event

    def on_cell_keydown(self, key: str) -> bool:
        """Handle a key pressed on a (non-editing) cell; returns whether it was consumed."""
        if self.is_editing:
            return False
        if key in ("Enter", " "):
            if self.config.simple_editable:
                return False
            self._enter_edit(True)
            return True
        return self._navigate(key, rows_only=False)

    def on_row_keydown(self, key: str) -> bool:
        """Handle a key pressed on a focused row (aria-roving selection): vertical keys only."""
        return self._navigate(key, rows_only=True)

    def on_cell_mouse_down(self) -> None:
        self._mouse_down = True

    def on_cell_focus(self, row: int, column: int) -> None:
        """A cell received focus by keyboard; pointer focus is left to :meth:`on_cell_click`."""
        if self._mouse_down:
            self._mouse_down = False
            return
        self.session.set_active_cell(Cell(column, row))

    def on_cell_click(self, row: int, column: int) -> None:
        """Activate the clicked cell; a second click on the active cell edits it.

        With ``edit_on_click`` every click edits.  ``simple_editable`` grids
        ignore cell clicks and edit through their buttons instead.
        """
        if self.config.simple_editable:
            return

        cell = Cell(column, row)
        clicked_active = cell == self.active_cell and not self.is_editing
        if self.is_editing and cell != self.active_cell and not self.config.edit_on_click:
            self.session.exit_edit(False)
        self.session.set_active_cell(cell)
        if self.config.editable and (self.config.edit_on_click or clicked_active):
            self._enter_edit(True)

    def on_cell_double_click(self) -> bool:
        """Edit the active cell; returns whether the default action should be prevented."""
        if self.config.edit_on_click or self.config.simple_editable:
            return False
        return self._enter_edit(True)

    def on_input_keydown(self, key: str, value: str, shift: bool = False) -> bool:
        """Handle a key pressed inside the cell editor; returns whether it was consumed.

        Escape cancels, Enter saves; both return focus to the cell.  With
        ``edit_on_click``, Tab / Shift+Tab save and move the editor along the
        row.
        """
        if not self.is_editing:
            return False

        if key == "Escape":
            self.session.cancel()
            self._log("edit cancelled")
            return True

        if key == "Enter":
            self.session.exit_edit(True)
            self._commit(value)
            return True

        if key == "Tab" and self.config.edit_on_click:
            column, row = self.active_cell
            target = column - 1 if shift else column + 1
            if self.data_column(target) is None:
                return False
            self._commit(value)
            self.session.move_active_cell(Cell(target, row))
            if not self.is_editable_cell(self.active_cell):
                self.session.exit_edit(True)
            return True

        return False

    def on_input_blur(
        self,
        value: str,
        row: int | None = None,
        column: int | None = None,
    ) -> EditCellEvent | None:
        """The cell editor lost focus: save, unless the session already closed.

        Hosts that know which editor blurred pass its *row* and *column*; a
        blur from an editor that is no longer the active one (after a Tab
        move) saves nothing.
        """
        if self.config.simple_editable or not self.is_editing:
            return None
        if row is not None and column is not None and Cell(column, row) != self.active_cell:
            return None
        return self._commit(value)

    def on_focus_out(self, outside_grid: bool) -> None:
        """Focus moved; leaving the grid while editing closes the editor without saving."""
        if self.is_editing and outside_grid and not self.config.simple_editable:
            self.session.exit_edit(False)
            self._log("focus left the grid, edit closed")

    def on_edit_button_click(
        self,
        row: int,
        column: int,
        edit: bool,
        save: bool = False,
        value: str = "",
    ) -> None:
        """Edit / save / cancel buttons of ``simple_editable`` grids."""
        self.session.set_active_cell(Cell(column, row))
        if edit:
            self._enter_edit(True)
        else:
            self.session.exit_edit(True)
        if save:
            self._commit(value)

    def cancel_edit(self) -> None:
        """Close the editor and discard the value of the next save attempt."""
        if self.is_editing:
            self.session.cancel()

    def drain_effects(self) -> list[ResolvedEffect]:
        """Acknowledge pending focus effects after a render and resolve their target.

        Must be called once the render reflecting the current state has
        settled.  Returns an empty list when nothing is pending.
        """
        effects = self.session.drain_effects()
        target = self.focus_target()
        if target is None:
            return []
        return [ResolvedEffect(effect.kind, target) for effect in effects]

    def focus_target(self) -> FocusTarget | None:
        """The element holding the roving focus point for the active cell."""
        column, row = self.active_cell
        if self.config.row_selection == "aria-roving":
            return FocusTarget("row", row, column, f"row-{row}")
        if self.has_checkbox_column and column == 0:
            return FocusTarget("checkbox", row, column, f"checkbox-{row}")

        descriptor = self.column_at(column)
        if descriptor is None:
            return None
        if descriptor.actions_column:
            return FocusTarget("action", row, column, f"action-{row}-{column}")
        if self.is_editing:
            return FocusTarget("input", row, column, f"cell-input-{row}-{column}")
        if self.config.simple_editable:
            return FocusTarget("edit_button", row, column, f"edit-{row}-{column}")
        return FocusTarget("cell", row, column, cell_dom_id(row, column))

    # ------------------------------------------------------------------
    # Sorting, filtering, selection
    # ------------------------------------------------------------------

    def on_sort_column(self, column: int) -> SortState:
        """Header activation on data column *column*; non-sortable columns are ignored."""
        if not 0 <= column < len(self._columns) or not self._columns[column].sortable:
            return self.sort_state
        self.sort_state = toggle_sort(self.sort_state, column)
        self._refresh_view()
        self._log(f"sorted column {column} {self.sort_state.direction}")
        return self.sort_state

    def on_filter_input(self, column: int, text: str) -> dict[int, str]:
        """Store the filter text of data column *column* and emit the new filter set."""
        if 0 <= column < len(self._columns):
            self.filters.set_text(self._column_ids[column], text)
        filters = self.filter_set
        self.events.emit(FilterEvent(filters))
        return filters

    @property
    def filter_set(self) -> dict[int, str]:
        return self.filters.filter_set(self._columns, self._column_ids)

    def filter_text(self, column: int) -> str:
        if not 0 <= column < len(self._columns):
            return ""
        return self.filters.text(self._column_ids[column])

    def on_row_select(self, row: int, selected: bool) -> bool:
        """Checkbox toggle on sorted position *row*; returns whether the flag changed."""
        if not 0 <= row < self.row_count:
            return False
        row_id = self._view_ids[row]
        if not self.selection.set_row_selected(row_id, selected):
            return False
        self.events.emit(RowSelectEvent(row_id, self._rows_by_id[row_id], selected))
        return True

    def on_select_all(self, selected: bool) -> None:
        self.selection.select_all(self._row_ids, selected)
        for row_id, row in zip(self._row_ids, self._rows):
            self.events.emit(RowSelectEvent(row_id, row, selected))
        self._log(f"select all: {selected} ({self.selection.count} selected)")

    def is_row_selected(self, row: int) -> bool:
        if not 0 <= row < self.row_count:
            return False
        return self.selection.is_selected(self._view_ids[row])

    @property
    def selected_row_count(self) -> int:
        return self.selection.count

    @property
    def selection_state(self) -> SelectionState:
        return self.selection.aggregate_state(len(self._rows))

    # ------------------------------------------------------------------
    # Rendering descriptors
    # ------------------------------------------------------------------

    def table_role(self) -> str:
        return "application" if self.config.use_application_role else self.config.grid_type

    def table_aria(self) -> dict[str, str]:
        """ARIA attributes for the table element."""
        attrs = {"role": self.table_role()}
        if self.config.use_application_role:
            attrs["aria-roledescription"] = "editable data grid"
        if not self.config.editable:
            attrs["aria-readonly"] = "true"
        if self.config.labelled_by:
            attrs["aria-labelledby"] = self.config.labelled_by
        return attrs

    def cell_role(self) -> str:
        return "gridcell" if self.config.grid_type == "grid" else "cell"

    def _is_focus_cell(self, row: int, column: int) -> bool:
        descriptor = self.column_at(column)
        return (
            Cell(column, row) == self.active_cell
            and descriptor is not None
            and not descriptor.actions_column
        )

    def cell_tab_index(self, row: int, column: int) -> int | None:
        """Roving ``tabIndex``: 0 on the active cell, -1 elsewhere, ``None`` when unmanaged."""
        if self.has_checkbox_column and column == 0:
            return 0 if Cell(column, row) == self.active_cell else -1
        if self.config.grid_type != "grid" or self.config.row_selection == "aria-roving":
            return None
        return 0 if self._is_focus_cell(row, column) else -1

    def row_tab_index(self, row: int) -> int | None:
        if self.config.row_selection != "aria-roving":
            return None
        return 0 if row == self.active_cell.row else -1

    def is_cell_editing(self, row: int, column: int) -> bool:
        return self.is_editing and self._is_focus_cell(row, column)

    def cell_is_readonly(self, column: int) -> bool:
        descriptor = self.column_at(column)
        return not self.config.editable or (descriptor is not None and descriptor.actions_column)

    def cell_aria_label(self, row: int, column: int) -> str | None:
        """``"<column name> <content>"`` under the application role, else ``None``."""
        descriptor = self.column_at(column)
        index = self.data_column(column)
        if not self.config.use_application_role or descriptor is None or index is None:
            return None
        if not 0 <= row < self.row_count:
            return None
        return f"{descriptor.name} {self._view_cells[row][index]}"

    def title_cell_id(self, row: int) -> str:
        return cell_dom_id(row, self.config.title_column + self.column_offset)

    def render_cell_content(self, content: str, column: int, row: int) -> Any:
        """Content for rendered *column*: the custom renderer's output, or an action button."""
        descriptor = self.column_at(column)
        if descriptor is not None and descriptor.actions_column:
            element_id = f"action-{row}-{column}"
            tab_index = None
            if self.config.grid_type == "grid":
                tab_index = 0 if Cell(column, row) == self.active_cell else -1
            return ActionControl(
                label=content,
                element_id=element_id,
                aria_labelledby=f"{element_id} {self.title_cell_id(row)}",
                tab_index=tab_index,
            )

        if self.render_custom_cell is None:
            return content
        index = self.data_column(column)
        return self.render_custom_cell(content, column if index is None else index, row)
