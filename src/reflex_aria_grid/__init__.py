"""reflex-aria-grid – an accessible, keyboard-driven data grid for Reflex.

The grid core (:class:`AriaGrid` and its engines) is plain Python over
polars and has no Reflex runtime dependency beyond the config models, so
it can be driven by any host.  The Reflex host is :class:`AriaGridMixin`
plus the :func:`aria_grid` UI helper::

    pip install reflex-aria-grid
"""

from reflex_aria_grid.edit_session import EditSession, FocusEffect
from reflex_aria_grid.events import (
    EditCellEvent,
    FilterEvent,
    GridEvent,
    GridEventBus,
    RowSelectEvent,
)
from reflex_aria_grid.filters import FilterRegistry
from reflex_aria_grid.grid import (
    ActionControl,
    AriaGrid,
    FocusTarget,
    ResolvedEffect,
    cell_dom_id,
)
from reflex_aria_grid.grid_state import AriaGridMixin, aria_grid, aria_grid_status_bar
from reflex_aria_grid.identity import IdentityArena
from reflex_aria_grid.models import Cell, GridBounds, GridColumn, GridConfig
from reflex_aria_grid.navigation import next_cell
from reflex_aria_grid.polars_utils import apply_text_filters, load_table
from reflex_aria_grid.selection import SelectionTracker
from reflex_aria_grid.sorting import SortState, sorted_view, toggle_sort
