"""Pydantic-style models for grid columns and configuration, plus core value types."""

from typing import Literal, NamedTuple

from reflex.components.props import PropsBase

GridType = Literal["grid", "table"]
RowSelectionPattern = Literal["none", "checkbox", "aria-roving"]
SortDirection = Literal["ascending", "descending", "none"]
SelectionState = bool | Literal["indeterminate"]


class Cell(NamedTuple):
    """A ``(column, row)`` coordinate in the rendered grid.

    ``column`` counts the checkbox column (when present) as column 0.
    """

    column: int
    row: int


class GridBounds(NamedTuple):
    """Navigation limits: ``row_count`` rows and columns ``0..max_col_index``."""

    row_count: int
    max_col_index: int


class GridColumn(PropsBase):
    """Column descriptor.

    Attributes are automatically converted from snake_case to camelCase
    when serialized to JavaScript props via PropsBase.
    """

    name: str
    sortable: bool = False
    filterable: bool = False
    actions_column: bool = False


class GridConfig(PropsBase):
    """Behavior switches for an :class:`~reflex_aria_grid.grid.AriaGrid`.

    Attributes:
        editable: Cells can enter edit mode.
        edit_on_click: A single click on any cell enters edit mode.  When
            off, the first click activates the cell and a second click (or
            double click, Enter, Space) edits it.
        simple_editable: Editing goes through explicit edit/save/cancel
            buttons instead of click-to-edit and blur-to-save.
        page_length: Rows moved by PageUp / PageDown.
        title_column: Index of the column that best labels a row.
        grid_type: ``"grid"`` gets roving focus, ``"table"`` is static content.
        row_selection: ``"none"``, ``"checkbox"`` (extra checkbox column) or
            ``"aria-roving"`` (the row itself holds focus).
        use_application_role: Render the table with ``role="application"``.
        description: Caption for the grid.
        labelled_by: Id of the labelling element.
        debug_log: Print state transitions to stdout.
    """

    editable: bool = True
    edit_on_click: bool = False
    simple_editable: bool = False
    page_length: int = 30
    title_column: int = 0
    grid_type: GridType = "table"
    row_selection: RowSelectionPattern = "none"
    use_application_role: bool = False
    description: str | None = None
    labelled_by: str | None = None
    debug_log: bool = False
