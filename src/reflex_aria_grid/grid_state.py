"""Reflex host for :class:`~reflex_aria_grid.grid.AriaGrid`: state mixin and UI helper.

Users inherit from :class:`AriaGridMixin` **and** ``rx.State``, call
:meth:`AriaGridMixin.set_grid_data` with their rows and columns, and render
with :func:`aria_grid`::

    from reflex_aria_grid import AriaGridMixin, GridColumn, aria_grid

    class MyState(AriaGridMixin, rx.State):
        def load_data(self):
            self.set_grid_data(rows, [GridColumn(name="Name", sortable=True)])

    def index():
        return rx.cond(MyState.aria_grid_loaded, aria_grid(MyState))

Every event handler forwards the browser event to the grid, copies the
grid state into the ``aria_grid_*`` vars, and returns the pending focus
effects as ``rx.call_script`` events.  The scripts run inside
``requestAnimationFrame`` so they act on the re-rendered DOM.

Per-row and per-cell attributes (ids, roving ``tabIndex``, ARIA labels,
action buttons) are computed by the grid and shipped inside
``aria_grid_rows``; the UI helper only binds them.
"""

import json
from collections import OrderedDict
from typing import Any

import reflex as rx

from reflex_aria_grid.events import EditCellEvent, FilterEvent
from reflex_aria_grid.grid import ActionControl, AriaGrid, ResolvedEffect, cell_dom_id
from reflex_aria_grid.models import GridColumn, GridConfig

# ---------------------------------------------------------------------------
# Module-level grid registry
# ---------------------------------------------------------------------------

# AriaGrid instances hold polars frames and callbacks, so they cannot live
# inside ``rx.State``.  They are kept here, keyed per state class and client,
# in least-recently-used order.  Past MAX_GRIDS entries the oldest grid is
# dropped; its client sees an expired grid and has to reload.
MAX_GRIDS = 256

_grid_registry: "OrderedDict[str, AriaGrid]" = OrderedDict()


def _get_grid(grid_id: str) -> AriaGrid:
    """Return (or create) the grid for *grid_id*, evicting the stalest grids."""
    grid = _grid_registry.get(grid_id)
    if grid is not None:
        _grid_registry.move_to_end(grid_id)
        return grid
    grid = _grid_registry[grid_id] = AriaGrid()
    while len(_grid_registry) > MAX_GRIDS:
        evicted, _ = _grid_registry.popitem(last=False)
        print(f"[AriaGrid] Evicted grid {evicted}")
    return grid


def _release_grid(grid_id: str) -> None:
    _grid_registry.pop(grid_id, None)


def effects_to_script(effects: list[ResolvedEffect]) -> str | None:
    """Build the frontend script applying *effects*, or ``None`` when there is nothing to do."""
    if not effects:
        return None
    element_id = json.dumps(effects[0].target.element_id)
    select = any(effect.kind == "select_text" for effect in effects)
    body = "el.focus();"
    if select:
        body += " if (typeof el.select === 'function') el.select();"
    return (
        "requestAnimationFrame(() => {"
        f" const el = document.getElementById({element_id});"
        f" if (el) {{ {body} }}"
        " })"
    )


def _cell_descriptor(grid: AriaGrid, row: int, column: int, content: str) -> dict[str, Any]:
    """Render attributes of the cell at rendered *column* of sorted *row*."""
    rendered = grid.render_cell_content(content, column, row)
    action = rendered if isinstance(rendered, ActionControl) else None
    return {
        "content": content,
        "display": content if action is not None else str(rendered),
        "column": column,
        "id": cell_dom_id(row, column),
        "input_id": f"cell-input-{row}-{column}",
        "edit_id": f"edit-{row}-{column}",
        "tab_index": grid.cell_tab_index(row, column),
        "editing": grid.is_cell_editing(row, column),
        "readonly": "true" if grid.cell_is_readonly(column) else None,
        "label": grid.cell_aria_label(row, column),
        "edit_buttons": grid.config.simple_editable and action is None,
        "action": action is not None,
        "action_id": action.element_id if action else "",
        "action_labelledby": action.aria_labelledby if action else "",
        "action_tab_index": action.tab_index if action else None,
    }


def _row_descriptor(grid: AriaGrid, row: int, row_id: int, cells: list[str]) -> dict[str, Any]:
    offset = grid.column_offset
    selected = grid.selection.is_selected(row_id)
    aria_rows = grid.config.row_selection == "aria-roving"
    return {
        "row_id": row_id,
        "id": f"row-{row}",
        "selected": selected,
        "aria_selected": str(selected).lower() if aria_rows else None,
        "tab_index": grid.row_tab_index(row),
        "checkbox_id": f"checkbox-{row}",
        "checkbox_tab_index": grid.cell_tab_index(row, 0) if offset else None,
        "cells": [
            _cell_descriptor(grid, row, index + offset, content)
            for index, content in enumerate(cells)
        ],
    }


class AriaGridMixin(rx.State, mixin=True):
    """Reflex State mixin wiring browser events into an :class:`AriaGrid`.

    This is a Reflex **mixin** (``mixin=True``): each concrete subclass
    gets its own ``aria_grid_*`` vars, so several grids can share a page.
    Subclasses must also inherit from ``rx.State``::

        class MyGrid(AriaGridMixin, rx.State):
            ...

    Override :meth:`on_aria_grid_edit` to persist edits somewhere else
    than the in-memory rows (the default writes them back with
    :meth:`AriaGrid.update_cell`; call ``self._aria_grid_write_back(event)``
    from an override to keep that).
    """

    # -- Frontend state vars --
    aria_grid_loaded: bool = False
    aria_grid_rows: list[dict[str, Any]] = []
    aria_grid_columns: list[dict[str, Any]] = []
    aria_grid_active_column: int = 0
    aria_grid_active_row: int = 0
    aria_grid_is_editing: bool = False
    aria_grid_selection_state: str = "false"
    aria_grid_selected_count: int = 0
    aria_grid_sort_column: int = -1
    aria_grid_sort_direction: str = "none"
    aria_grid_filters: dict[str, str] = {}
    aria_grid_status: str = ""
    aria_grid_table_aria: dict[str, str] = {"role": "table"}
    aria_grid_cell_role: str = "cell"
    aria_grid_description: str = ""
    aria_grid_checkbox_column: bool = False

    # -- Backend-only vars (not sent to frontend) --
    _aria_grid_id: str = ""
    # Editor text as typed; ``None`` until the editor reports a change.
    _aria_grid_draft: str | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def set_grid_data(
        self,
        cells: list[list[str]],
        columns: list[GridColumn],
        config: GridConfig | None = None,
    ) -> None:
        """Load rows and columns into this client's grid and publish its state.

        Args:
            cells: Ordered rows of string cells.
            columns: One descriptor per data column.
            config: Behavior switches; defaults to an editable ``"grid"``.
        """
        grid = self._aria_grid()
        if config is None:
            config = GridConfig(grid_type="grid")
        grid.config = config
        grid.session.config = config
        grid.set_columns(columns)
        grid.set_cells(cells)
        grid.clamp_active_cell()
        self.aria_grid_loaded = True  # type: ignore[assignment]
        self.aria_grid_status = f"Ready: {grid.row_count:,} rows."  # type: ignore[assignment]
        self._sync_aria_grid()

    def release_aria_grid(self) -> None:
        """Drop this client's grid from the registry, e.g. when the page unloads."""
        if self._aria_grid_id:
            _release_grid(self._aria_grid_id)
        self.aria_grid_loaded = False  # type: ignore[assignment]

    def on_aria_grid_edit(self, event: EditCellEvent) -> None:
        """Persist a committed edit; writes it back into the grid rows by default."""
        self._aria_grid_write_back(event)

    def on_aria_grid_filter(self, event: FilterEvent) -> None:
        """React to a new filter set; the default only reports it."""
        n_filters = len(event.filters)
        self.aria_grid_status = f"{n_filters} active filter(s)."  # type: ignore[assignment]

    def _aria_grid_write_back(self, event: EditCellEvent) -> None:
        """Store *event* in the grid rows; overrides of the edit hook can call this."""
        self._aria_grid().update_cell(event.row, event.column, event.value)
        self.aria_grid_status = (  # type: ignore[assignment]
            f"Saved row {event.row + 1}, column {event.column + 1}: {event.value!r}"
        )

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def handle_aria_grid_cell_keydown(self, key: str):
        """Keydown bubbling up to the table body.

        Rows hold focus under aria-roving selection, so keys move rows there.
        """
        grid = self._aria_grid()
        if grid.config.row_selection == "aria-roving":
            grid.on_row_keydown(key)
        else:
            grid.on_cell_keydown(key)
        return self._sync_aria_grid()

    def handle_aria_grid_cell_mouse_down(self) -> None:
        self._aria_grid().on_cell_mouse_down()

    def handle_aria_grid_cell_focus(self, row: int, column: int):
        self._aria_grid().on_cell_focus(row, column)
        return self._sync_aria_grid()

    def handle_aria_grid_cell_click(self, row: int, column: int):
        self._aria_grid().on_cell_click(row, column)
        return self._sync_aria_grid()

    def handle_aria_grid_cell_double_click(self):
        self._aria_grid().on_cell_double_click()
        return self._sync_aria_grid()

    def handle_aria_grid_input_change(self, value: str) -> None:
        self._aria_grid_draft = value  # type: ignore[assignment]

    def handle_aria_grid_input_keydown(self, key: str, key_info: dict):
        grid = self._aria_grid()
        shift = bool(key_info.get("shift_key", False))
        with self._collect_grid_events(grid):
            grid.on_input_keydown(key, self._aria_grid_value(), shift=shift)
        return self._sync_aria_grid()

    def handle_aria_grid_input_blur(self, row: int, column: int, value: str):
        """Save on blur; a blur that saved means focus went elsewhere, so close the editor.

        A blur right after Enter or Escape, or from the editor a Tab move
        left behind, saves nothing and leaves the session as it was.
        """
        grid = self._aria_grid()
        with self._collect_grid_events(grid):
            saved = grid.on_input_blur(value, row, column)
            if saved is not None:
                grid.on_focus_out(outside_grid=True)
        return self._sync_aria_grid()

    def handle_aria_grid_focus_out(self):
        """For hosts that detect focus leaving the grid subtree themselves."""
        self._aria_grid().on_focus_out(outside_grid=True)
        return self._sync_aria_grid()

    def handle_aria_grid_edit_button(self, row: int, column: int, edit: bool, save: bool):
        grid = self._aria_grid()
        with self._collect_grid_events(grid):
            grid.on_edit_button_click(row, column, edit, save, self._aria_grid_value())
        return self._sync_aria_grid()

    def handle_aria_grid_sort(self, column: int):
        self._aria_grid().on_sort_column(column)
        return self._sync_aria_grid()

    def handle_aria_grid_filter(self, column: int, text: str):
        grid = self._aria_grid()
        with self._collect_grid_events(grid):
            grid.on_filter_input(column, text)
        return self._sync_aria_grid()

    def handle_aria_grid_row_select(self, row: int, selected: bool):
        self._aria_grid().on_row_select(row, selected)
        return self._sync_aria_grid()

    def handle_aria_grid_select_all(self, selected: bool):
        self._aria_grid().on_select_all(selected)
        return self._sync_aria_grid()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _aria_grid(self) -> AriaGrid:
        if not self._aria_grid_id:
            token = self.router.session.client_token
            self._aria_grid_id = f"{type(self).__name__}:{token}"  # type: ignore[assignment]
        expired = self.aria_grid_loaded and self._aria_grid_id not in _grid_registry
        grid = _get_grid(self._aria_grid_id)
        if expired:
            self.aria_grid_loaded = False  # type: ignore[assignment]
            self.aria_grid_status = "Grid data expired; reload the page."  # type: ignore[assignment]
        return grid

    def _aria_grid_value(self) -> str:
        """The editor text: the typed draft, else the active cell's current content."""
        if self._aria_grid_draft is not None:
            return self._aria_grid_draft
        grid = self._aria_grid()
        column = grid.data_column(grid.active_cell.column)
        row = grid.active_cell.row
        if column is None or not 0 <= row < grid.row_count:
            return ""
        return grid.sorted_cells[row][column]

    def _collect_grid_events(self, grid: AriaGrid) -> "_GridEventCollector":
        return _GridEventCollector(self, grid)

    def _sync_aria_grid(self) -> list[rx.event.EventSpec]:
        """Copy grid state into the frontend vars and return the pending focus effects."""
        grid = self._aria_grid()
        self.aria_grid_rows = [  # type: ignore[assignment]
            _row_descriptor(grid, index, row_id, cells)
            for index, (row_id, cells) in enumerate(zip(grid.sorted_row_ids, grid.sorted_cells))
        ]
        self.aria_grid_columns = [  # type: ignore[assignment]
            {**column.dict(), "filterText": grid.filter_text(index)}
            for index, column in enumerate(grid.columns)
        ]
        column, row = grid.active_cell
        moved = (column, row) != (self.aria_grid_active_column, self.aria_grid_active_row)
        self.aria_grid_active_column = column  # type: ignore[assignment]
        self.aria_grid_active_row = row  # type: ignore[assignment]
        self.aria_grid_is_editing = grid.is_editing  # type: ignore[assignment]
        self.aria_grid_selection_state = str(grid.selection_state).lower()  # type: ignore[assignment]
        self.aria_grid_selected_count = grid.selected_row_count  # type: ignore[assignment]
        sort_column = grid.sort_state.column
        self.aria_grid_sort_column = -1 if sort_column is None else sort_column  # type: ignore[assignment]
        self.aria_grid_sort_direction = grid.sort_state.direction  # type: ignore[assignment]
        self.aria_grid_filters = {str(k): v for k, v in grid.filter_set.items()}  # type: ignore[assignment]
        self.aria_grid_table_aria = grid.table_aria()  # type: ignore[assignment]
        self.aria_grid_cell_role = grid.cell_role()  # type: ignore[assignment]
        self.aria_grid_description = grid.config.description or ""  # type: ignore[assignment]
        self.aria_grid_checkbox_column = grid.has_checkbox_column  # type: ignore[assignment]
        if moved or not grid.is_editing:
            self._aria_grid_draft = None  # type: ignore[assignment]

        script = effects_to_script(grid.drain_effects())
        if script is None:
            return []
        return [rx.call_script(script)]


class _GridEventCollector:
    """Context manager routing grid events to the mixin hooks while a handler runs."""

    def __init__(self, state: AriaGridMixin, grid: AriaGrid) -> None:
        self._state = state
        self._grid = grid
        self._edits: list[EditCellEvent] = []
        self._filters: list[FilterEvent] = []
        self._unsubscribe: list[Any] = []

    def __enter__(self) -> "_GridEventCollector":
        self._unsubscribe = [
            self._grid.events.subscribe(EditCellEvent, self._edits.append),
            self._grid.events.subscribe(FilterEvent, self._filters.append),
        ]
        return self

    def __exit__(self, *exc_info: Any) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        if exc_info[0] is not None:
            return
        for edit in self._edits:
            self._state.on_aria_grid_edit(edit)
        for event in self._filters:
            self._state.on_aria_grid_filter(event)


# ---------------------------------------------------------------------------
# UI helper
# ---------------------------------------------------------------------------
# ARIA attributes and ``tabIndex`` go through ``custom_attrs`` so they reach
# the DOM with their exact names; ``null`` values are left off the element.


# -- Keydown on the table body: only the key is forwarded
def _on_key_down_spec(event: rx.Var) -> list[rx.Var]:
    return [rx.Var(f"{event}.key").to(str)]


class GridBody(rx.el.Tbody):
    """``<tbody>`` that reports the keydown events bubbling up from its cells."""

    on_key_down: rx.EventHandler[_on_key_down_spec]


def _header_cell(state_cls: type, column: rx.Var, index: rx.Var) -> rx.Component:
    is_sorted = state_cls.aria_grid_sort_column == index  # type: ignore[attr-defined]
    sort_label = rx.cond(
        is_sorted,
        rx.cond(state_cls.aria_grid_sort_direction == "ascending", " ▲", " ▼"),  # type: ignore[attr-defined]
        "",
    )
    return rx.el.th(
        rx.cond(
            column["sortable"].to(bool),
            rx.el.button(
                column["name"].to(str),
                sort_label,
                type="button",
                class_name="sort-button",
                on_click=state_cls.handle_aria_grid_sort(index),  # type: ignore[attr-defined]
            ),
            rx.el.span(column["name"].to(str)),
        ),
        rx.cond(
            column["filterable"].to(bool),
            rx.el.input(
                default_value=column["filterText"].to(str),
                class_name="filter-input",
                on_change=lambda text: state_cls.handle_aria_grid_filter(index, text),  # type: ignore[attr-defined]
                custom_attrs={"aria-label": "Filter " + column["name"].to(str)},
            ),
        ),
        role="columnheader",
        custom_attrs={
            "aria-sort": rx.cond(is_sorted, state_cls.aria_grid_sort_direction, "none"),  # type: ignore[attr-defined]
        },
    )


def _simple_edit_buttons(state_cls: type, cell: rx.Var, row_index: rx.Var) -> rx.Component:
    """Edit button, or Save / Cancel while editing (``simple_editable`` grids)."""
    column_index = cell["column"].to(int)
    return rx.cond(
        cell["editing"].to(bool),
        rx.fragment(
            rx.el.button(
                "Save",
                type="button",
                class_name="grid-button",
                on_click=state_cls.handle_aria_grid_edit_button(  # type: ignore[attr-defined]
                    row_index, column_index, False, True
                ).stop_propagation,
            ),
            rx.el.button(
                "Cancel",
                type="button",
                class_name="grid-button",
                on_click=state_cls.handle_aria_grid_edit_button(  # type: ignore[attr-defined]
                    row_index, column_index, False, False
                ).stop_propagation,
            ),
        ),
        rx.el.button(
            "Edit",
            id=cell["edit_id"].to(str),
            type="button",
            class_name="grid-button",
            on_click=state_cls.handle_aria_grid_edit_button(  # type: ignore[attr-defined]
                row_index, column_index, True, False
            ).stop_propagation,
        ),
    )


def _cell_content(cell: rx.Var) -> rx.Component:
    """Cell text, or the built-in button of an actions column."""
    return rx.el.span(
        rx.cond(
            cell["action"].to(bool),
            rx.el.button(
                cell["display"].to(str),
                id=cell["action_id"].to(str),
                type="button",
                class_name="grid-button",
                custom_attrs={
                    "aria-labelledby": cell["action_labelledby"],
                    "tabIndex": cell["action_tab_index"],
                },
            ),
            rx.fragment(cell["display"].to(str)),
        ),
        class_name="cell-content",
    )


def _data_cell(state_cls: type, cell: rx.Var, row_index: rx.Var) -> rx.Component:
    column_index = cell["column"].to(int)
    is_editing = cell["editing"].to(bool)
    return rx.el.td(
        rx.cond(
            is_editing,
            rx.el.input(
                id=cell["input_id"].to(str),
                default_value=cell["content"].to(str),
                class_name="cell-edit",
                on_change=state_cls.handle_aria_grid_input_change,  # type: ignore[attr-defined]
                # The editor handles its own keys; the body keydown must not see them.
                on_key_down=state_cls.handle_aria_grid_input_keydown.stop_propagation,  # type: ignore[attr-defined]
                on_blur=lambda value: state_cls.handle_aria_grid_input_blur(  # type: ignore[attr-defined]
                    row_index, column_index, value
                ),
            ),
            _cell_content(cell),
        ),
        rx.cond(
            cell["edit_buttons"].to(bool),
            _simple_edit_buttons(state_cls, cell, row_index),
        ),
        id=cell["id"].to(str),
        role=state_cls.aria_grid_cell_role,  # type: ignore[attr-defined]
        class_name=rx.cond(is_editing, "cell editing", "cell"),
        custom_attrs={
            "tabIndex": cell["tab_index"],
            "aria-readonly": cell["readonly"],
            "aria-label": cell["label"],
        },
        on_focus=state_cls.handle_aria_grid_cell_focus(row_index, column_index),  # type: ignore[attr-defined]
        on_click=state_cls.handle_aria_grid_cell_click(row_index, column_index),  # type: ignore[attr-defined]
        on_double_click=state_cls.handle_aria_grid_cell_double_click,  # type: ignore[attr-defined]
        on_mouse_down=state_cls.handle_aria_grid_cell_mouse_down,  # type: ignore[attr-defined]
    )


def _checkbox_cell(state_cls: type, row: rx.Var, row_index: rx.Var) -> rx.Component:
    return rx.el.td(
        rx.checkbox(
            id=row["checkbox_id"].to(str),
            checked=row["selected"].to(bool),
            on_change=lambda checked: state_cls.handle_aria_grid_row_select(row_index, checked),  # type: ignore[attr-defined]
            custom_attrs={"tabIndex": row["checkbox_tab_index"], "aria-label": "select row"},
        ),
        role=state_cls.aria_grid_cell_role,  # type: ignore[attr-defined]
        class_name="checkbox-cell",
    )


def _body_row(state_cls: type, row: rx.Var, row_index: rx.Var) -> rx.Component:
    return rx.el.tr(
        rx.cond(state_cls.aria_grid_checkbox_column, _checkbox_cell(state_cls, row, row_index)),  # type: ignore[attr-defined]
        rx.foreach(
            row["cells"].to(list[dict[str, Any]]),
            lambda cell: _data_cell(state_cls, cell, row_index),
        ),
        id=row["id"].to(str),
        role="row",
        class_name="row",
        custom_attrs={
            "tabIndex": row["tab_index"],
            "aria-selected": row["aria_selected"],
        },
    )


def aria_grid(state_cls: type, *, caption: str | None = None, **props: Any) -> rx.Component:
    """Render the grid of *state_cls* as an accessible ``<table>``.

    Args:
        state_cls: The ``rx.State`` subclass that inherits from
            :class:`AriaGridMixin`.
        caption: Table caption; defaults to ``GridConfig.description``.
        **props: Extra props for the ``<table>`` element.

    Returns:
        A Reflex component tree: header row with sort buttons and filter
        inputs, a select-all checkbox when the checkbox pattern is on, and
        one row per sorted data row with roving ``tabIndex`` on cells.
    """
    selection_state = state_cls.aria_grid_selection_state  # type: ignore[attr-defined]
    table_aria = state_cls.aria_grid_table_aria  # type: ignore[attr-defined]
    select_all = rx.cond(
        state_cls.aria_grid_checkbox_column,  # type: ignore[attr-defined]
        rx.el.th(
            rx.checkbox(
                checked=selection_state == "true",
                on_change=state_cls.handle_aria_grid_select_all,  # type: ignore[attr-defined]
                custom_attrs={
                    "aria-label": "select all rows",
                    "aria-checked": rx.cond(
                        selection_state == "indeterminate",
                        "mixed",
                        selection_state,
                    ),
                },
            ),
            role="columnheader",
            class_name="checkbox-cell",
        ),
    )
    if caption is not None:
        caption_element = rx.el.caption(caption)
    else:
        description = state_cls.aria_grid_description  # type: ignore[attr-defined]
        caption_element = rx.cond(description != "", rx.el.caption(description))
    custom_attrs = {
        "aria-roledescription": table_aria["aria-roledescription"],
        "aria-readonly": table_aria["aria-readonly"],
        "aria-labelledby": table_aria["aria-labelledby"],
        **props.pop("custom_attrs", {}),
    }
    return rx.el.table(
        caption_element,
        rx.el.thead(
            rx.el.tr(
                select_all,
                rx.foreach(
                    state_cls.aria_grid_columns,  # type: ignore[attr-defined]
                    lambda column, index: _header_cell(state_cls, column, index),
                ),
                role="row",
                class_name="row",
            ),
            role="rowgroup",
            class_name="grid-header",
        ),
        GridBody.create(
            rx.foreach(
                state_cls.aria_grid_rows,  # type: ignore[attr-defined]
                lambda row, row_index: _body_row(state_cls, row, row_index),
            ),
            role="rowgroup",
            class_name="grid-body",
            on_key_down=state_cls.handle_aria_grid_cell_keydown,  # type: ignore[attr-defined]
        ),
        role=table_aria["role"],
        class_name="grid",
        custom_attrs=custom_attrs,
        **props,
    )


def aria_grid_status_bar(state_cls: type) -> rx.Component:
    """Compact status line: row count, selection count and the last grid message."""
    return rx.hstack(
        rx.text(
            state_cls.aria_grid_rows.length().to_string() + " rows",  # type: ignore[attr-defined]
            size="2",
            weight="medium",
        ),
        rx.text("|", size="2", color="var(--gray-7)"),
        rx.text(
            state_cls.aria_grid_selected_count.to_string() + " selected",  # type: ignore[attr-defined]
            size="2",
            color="var(--gray-11)",
        ),
        rx.text("|", size="2", color="var(--gray-7)"),
        rx.text(state_cls.aria_grid_status, size="2", color="var(--gray-11)"),  # type: ignore[attr-defined]
        spacing="2",
        padding="0.5em 0",
    )
