"""Example Reflex app demonstrating the accessible grid.

Three tabs, one grid state class each:
  1. Inventory -- an editable ``grid`` with a checkbox selection column.
     Double click, Enter or Space edit a cell; Escape cancels, Enter saves.
  2. Contacts -- a read-only ``table``: arrow keys still move the focus
     point, nothing is editable, headers sort and filter.
  3. Tasks -- rows take the focus (``aria-roving`` selection) and cells are
     edited through explicit Edit / Save / Cancel buttons.  The last
     column is an actions column holding a Details button per row.
"""

import reflex as rx

from reflex_aria_grid import (
    AriaGridMixin,
    EditCellEvent,
    GridColumn,
    GridConfig,
    aria_grid,
    aria_grid_status_bar,
)

# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

INVENTORY_COLUMNS: list[GridColumn] = [
    GridColumn(name="Item", sortable=True, filterable=True),
    GridColumn(name="Category", sortable=True, filterable=True),
    GridColumn(name="Quantity", sortable=True),
    GridColumn(name="Location", filterable=True),
]

INVENTORY_ROWS: list[list[str]] = [
    ["Bolts", "Hardware", "1200", "Aisle 3"],
    ["Screwdriver", "Tools", "35", "Aisle 1"],
    ["Wood glue", "Adhesives", "48", "Aisle 7"],
    ["Hammer", "Tools", "22", "Aisle 1"],
    ["Washers", "Hardware", "900", "Aisle 3"],
    ["Epoxy", "Adhesives", "15", "Aisle 7"],
    ["Tape measure", "Tools", "40", "Aisle 2"],
    ["Anchors", "Hardware", "640", "Aisle 4"],
]

CONTACT_COLUMNS: list[GridColumn] = [
    GridColumn(name="Name", sortable=True, filterable=True),
    GridColumn(name="Team", sortable=True, filterable=True),
    GridColumn(name="Email"),
]

CONTACT_ROWS: list[list[str]] = [
    ["Alice Smith", "Engineering", "alice@example.com"],
    ["Bob Johnson", "Marketing", "bob@example.com"],
    ["Charlie Williams", "Engineering", "charlie@example.com"],
    ["Diana Brown", "Sales", "diana@example.com"],
    ["Eve Jones", "Engineering", "eve@example.com"],
    ["Frank Garcia", "Marketing", "frank@example.com"],
]

TASK_COLUMNS: list[GridColumn] = [
    GridColumn(name="Task", sortable=True),
    GridColumn(name="Owner", sortable=True, filterable=True),
    GridColumn(name="Status", sortable=True, filterable=True),
    GridColumn(name="Actions", actions_column=True),
]

TASK_ROWS: list[list[str]] = [
    ["Write release notes", "Grace", "open", "Details"],
    ["Review keyboard map", "Hank", "in progress", "Details"],
    ["Audit contrast", "Ivy", "done", "Details"],
    ["Screen reader pass", "Jack", "open", "Details"],
]


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

class InventoryGrid(AriaGridMixin, rx.State):
    """Editable grid with checkbox selection; logs every saved edit."""

    edit_log: list[str] = []

    def load(self) -> None:
        self.set_grid_data(
            [list(row) for row in INVENTORY_ROWS],
            INVENTORY_COLUMNS,
            GridConfig(grid_type="grid", row_selection="checkbox", debug_log=True),
        )

    def on_aria_grid_edit(self, event: EditCellEvent) -> None:
        self._aria_grid_write_back(event)
        column = INVENTORY_COLUMNS[event.column].name
        self.edit_log = [f"{column} -> {event.value!r}", *self.edit_log][:5]


class ContactGrid(AriaGridMixin, rx.State):
    """Read-only table."""

    def load(self) -> None:
        self.set_grid_data(
            [list(row) for row in CONTACT_ROWS],
            CONTACT_COLUMNS,
            GridConfig(grid_type="table", editable=False, description="Contacts"),
        )


class TaskGrid(AriaGridMixin, rx.State):
    """Row-focused grid edited through explicit buttons."""

    def load(self) -> None:
        self.set_grid_data(
            [list(row) for row in TASK_ROWS],
            TASK_COLUMNS,
            GridConfig(
                grid_type="grid",
                row_selection="aria-roving",
                editable=False,
                simple_editable=True,
            ),
        )


# ---------------------------------------------------------------------------
# UI components
# ---------------------------------------------------------------------------

def _status_box(*children: rx.Component) -> rx.Component:
    """Styled status box below a grid."""
    return rx.box(
        *children,
        margin_top="1em",
        padding="1em",
        border_radius="8px",
        background="var(--gray-a3)",
    )


def inventory_tab() -> rx.Component:
    return rx.box(
        rx.text(
            "Arrow keys, Home / End and Page Up / Down move the active cell. "
            "Enter, Space or a double click start editing.",
            margin_bottom="1em",
            color="var(--gray-11)",
        ),
        rx.cond(
            InventoryGrid.aria_grid_loaded,
            rx.fragment(
                aria_grid_status_bar(InventoryGrid),
                aria_grid(InventoryGrid, caption="Inventory"),
            ),
        ),
        _status_box(
            rx.foreach(InventoryGrid.edit_log, lambda line: rx.text(line, size="2")),
        ),
        padding_top="1em",
    )


def contacts_tab() -> rx.Component:
    return rx.box(
        rx.text(
            "A read-only table: the focus point still moves, nothing can be edited.",
            margin_bottom="1em",
            color="var(--gray-11)",
        ),
        rx.cond(
            ContactGrid.aria_grid_loaded,
            aria_grid(ContactGrid),
        ),
        _status_box(rx.text(ContactGrid.aria_grid_status, size="2")),
        padding_top="1em",
    )


def tasks_tab() -> rx.Component:
    return rx.box(
        rx.text(
            "Rows take the focus here; Up / Down move between rows. "
            "Use the Edit buttons to change a cell.",
            margin_bottom="1em",
            color="var(--gray-11)",
        ),
        rx.cond(
            TaskGrid.aria_grid_loaded,
            aria_grid(TaskGrid, caption="Tasks"),
        ),
        _status_box(rx.text(TaskGrid.aria_grid_status, size="2")),
        padding_top="1em",
    )


def index() -> rx.Component:
    """Render the main page with tabs."""
    return rx.box(
        rx.heading("Accessible Grid -- Reflex Demo", size="6", margin_bottom="1em"),
        rx.tabs.root(
            rx.tabs.list(
                rx.tabs.trigger("Inventory", value="inventory"),
                rx.tabs.trigger("Contacts", value="contacts"),
                rx.tabs.trigger("Tasks", value="tasks"),
            ),
            rx.tabs.content(inventory_tab(), value="inventory"),
            rx.tabs.content(contacts_tab(), value="contacts"),
            rx.tabs.content(tasks_tab(), value="tasks"),
            default_value="inventory",
        ),
        padding="2em",
        max_width="1400px",
        margin="0 auto",
    )


app = rx.App()
app.add_page(
    index,
    on_load=[InventoryGrid.load, ContactGrid.load, TaskGrid.load],
)
