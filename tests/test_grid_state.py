"""Tests for the Reflex host: state mixin handlers, registry and UI helper."""

from collections import OrderedDict

import pytest
import reflex as rx

from reflex_aria_grid import grid_state
from reflex_aria_grid.events import EditCellEvent, FilterEvent
from reflex_aria_grid.grid import FocusTarget, ResolvedEffect
from reflex_aria_grid.grid_state import (
    AriaGridMixin,
    GridBody,
    _get_grid,
    aria_grid,
    effects_to_script,
)
from reflex_aria_grid.models import GridColumn, GridConfig


class SheetState(AriaGridMixin, rx.State):
    """Grid host with the default hooks."""


class AuditedSheetState(AriaGridMixin, rx.State):
    """Grid host recording what reaches its hooks."""

    edits: list[str] = []
    filter_counts: list[int] = []

    def on_aria_grid_edit(self, event: EditCellEvent) -> None:
        self._aria_grid_write_back(event)
        self.edits = [*self.edits, event.value]

    def on_aria_grid_filter(self, event: FilterEvent) -> None:
        self.filter_counts = [*self.filter_counts, len(event.filters)]


@pytest.fixture
def load(cells, columns):
    """Instantiate a grid state and load the sample data with config overrides."""
    states = []

    def _load(state_cls=SheetState, extra_columns=(), **config):
        config.setdefault("grid_type", "grid")
        state = state_cls()
        rows = [[*row, *(column.name for column in extra_columns)] for row in cells]
        state.set_grid_data(rows, [*columns, *extra_columns], GridConfig(**config))
        states.append(state)
        return state

    yield _load
    for state in states:
        state.release_aria_grid()


def _cell(state, row: int, index: int) -> dict:
    return state.aria_grid_rows[row]["cells"][index]


# ---------------------------------------------------------------------------
# Focus scripts
# ---------------------------------------------------------------------------


def test_no_effects_no_script() -> None:
    assert effects_to_script([]) is None


def test_focus_script() -> None:
    target = FocusTarget("cell", 2, 1, "cell-2-1")
    script = effects_to_script([ResolvedEffect("focus", target)])
    assert 'document.getElementById("cell-2-1")' in script
    assert "el.focus()" in script
    assert "select()" not in script


def test_select_text_script() -> None:
    target = FocusTarget("input", 0, 0, "cell-input-0-0")
    script = effects_to_script([ResolvedEffect("focus", target), ResolvedEffect("select_text", target)])
    assert "requestAnimationFrame" in script
    assert "el.select()" in script


# ---------------------------------------------------------------------------
# UI helper
# ---------------------------------------------------------------------------


def test_grid_body_declares_key_down_trigger() -> None:
    assert "on_key_down" in GridBody.get_event_triggers()


def test_aria_grid_builds_with_body_keydown() -> None:
    table = aria_grid(SheetState)
    bodies = [child for child in table.children if isinstance(child, GridBody)]
    assert len(bodies) == 1
    assert "on_key_down" in bodies[0].event_triggers


def test_aria_grid_builds_with_caption_and_extra_attrs() -> None:
    table = aria_grid(SheetState, caption="People", custom_attrs={"data-grid": "people"})
    assert "data-grid" in table.custom_attrs
    assert "aria-labelledby" in table.custom_attrs


# ---------------------------------------------------------------------------
# Render descriptors published to the frontend
# ---------------------------------------------------------------------------


def test_table_aria_and_description_are_published(load) -> None:
    state = load(editable=False, labelled_by="title", description="People")
    assert state.aria_grid_table_aria == {
        "role": "grid",
        "aria-readonly": "true",
        "aria-labelledby": "title",
    }
    assert state.aria_grid_description == "People"
    assert state.aria_grid_cell_role == "gridcell"
    assert _cell(state, 0, 0)["readonly"] == "true"


def test_application_role_labels_cells(load) -> None:
    state = load(use_application_role=True)
    assert state.aria_grid_table_aria["role"] == "application"
    assert state.aria_grid_table_aria["aria-roledescription"] == "editable data grid"
    assert _cell(state, 0, 0)["label"] == "Name carol"
    assert _cell(state, 0, 0)["readonly"] is None


def test_roving_tab_index_on_cells(load) -> None:
    state = load()
    assert _cell(state, 0, 0)["tab_index"] == 0
    assert _cell(state, 0, 1)["tab_index"] == -1
    assert _cell(state, 1, 0)["tab_index"] == -1
    assert state.aria_grid_rows[0]["tab_index"] is None


def test_static_table_leaves_tab_index_unset(load) -> None:
    state = load(grid_type="table")
    assert _cell(state, 0, 0)["tab_index"] is None
    assert state.aria_grid_cell_role == "cell"


def test_aria_roving_rows_take_the_tab_index(load) -> None:
    state = load(row_selection="aria-roving")
    first, second = state.aria_grid_rows[:2]
    assert (first["id"], first["tab_index"], first["aria_selected"]) == ("row-0", 0, "false")
    assert second["tab_index"] == -1
    assert _cell(state, 0, 0)["tab_index"] is None


def test_checkbox_column_shifts_cell_ids(load) -> None:
    state = load(row_selection="checkbox")
    row = state.aria_grid_rows[0]
    assert row["checkbox_id"] == "checkbox-0"
    assert row["checkbox_tab_index"] == 0
    assert row["aria_selected"] is None
    assert (_cell(state, 0, 0)["column"], _cell(state, 0, 0)["id"]) == (1, "cell-0-1")
    assert _cell(state, 0, 0)["tab_index"] == -1


def test_actions_column_renders_a_labelled_button(load) -> None:
    state = load(extra_columns=[GridColumn(name="Open", actions_column=True)], title_column=0)
    action = _cell(state, 1, 3)
    assert action["action"] is True
    assert action["action_id"] == "action-1-3"
    assert action["action_labelledby"] == "action-1-3 cell-1-0"
    assert action["action_tab_index"] == -1
    assert action["display"] == "Open"
    assert action["readonly"] == "true"
    assert action["edit_buttons"] is False
    assert _cell(state, 1, 0)["action"] is False


def test_simple_editable_cells_get_edit_buttons(load) -> None:
    state = load(simple_editable=True)
    assert _cell(state, 0, 0)["edit_buttons"] is True
    assert _cell(state, 0, 0)["edit_id"] == "edit-0-0"


def test_custom_renderer_output_is_displayed(load) -> None:
    state = load()
    state._aria_grid().render_custom_cell = lambda content, column, row: f"{column}:{content.upper()}"
    state._sync_aria_grid()
    assert _cell(state, 0, 1)["display"] == "1:OSLO"
    assert _cell(state, 0, 1)["content"] == "Oslo"


# ---------------------------------------------------------------------------
# Event handlers
# ---------------------------------------------------------------------------


def test_double_click_opens_editor_and_returns_focus_script(load) -> None:
    state = load()
    result = state.handle_aria_grid_cell_double_click()
    assert state.aria_grid_is_editing
    assert _cell(state, 0, 0)["editing"] is True
    assert len(result) == 1


def test_editor_value_prefers_the_typed_draft(load) -> None:
    state = load()
    state.handle_aria_grid_cell_double_click()
    assert state._aria_grid_value() == "carol"
    state.handle_aria_grid_input_change("zed")
    assert state._aria_grid_value() == "zed"


def test_enter_saves_the_draft_and_writes_it_back(load) -> None:
    state = load()
    state.handle_aria_grid_cell_double_click()
    state.handle_aria_grid_input_change("Carla")
    state.handle_aria_grid_input_keydown("Enter", {"shift_key": False})
    assert not state.aria_grid_is_editing
    assert _cell(state, 0, 0)["content"] == "Carla"
    assert state.aria_grid_status == "Saved row 1, column 1: 'Carla'"
    assert state._aria_grid_draft is None


def test_blur_save_closes_the_editor(load) -> None:
    state = load()
    state.handle_aria_grid_cell_double_click()
    state.handle_aria_grid_input_blur(0, 0, "Zed")
    assert not state.aria_grid_is_editing
    assert _cell(state, 0, 0)["content"] == "Zed"


def test_blur_after_escape_saves_nothing(load) -> None:
    state = load()
    state.handle_aria_grid_cell_double_click()
    state.handle_aria_grid_input_keydown("Escape", {"shift_key": False})
    state.handle_aria_grid_input_blur(0, 0, "Zed")
    assert _cell(state, 0, 0)["content"] == "carol"


def test_tab_moves_the_editor_right(load) -> None:
    state = load(edit_on_click=True)
    state.handle_aria_grid_cell_click(0, 1)
    state.handle_aria_grid_input_change("Bergen")
    state.handle_aria_grid_input_keydown("Tab", {"shift_key": False})
    assert state.aria_grid_active_column == 2
    assert _cell(state, 0, 1)["content"] == "Bergen"


def test_shift_tab_moves_the_editor_left(load) -> None:
    state = load(edit_on_click=True)
    state.handle_aria_grid_cell_click(0, 1)
    state.handle_aria_grid_input_change("Bergen")
    state.handle_aria_grid_input_keydown("Tab", {"shift_key": True})
    assert state.aria_grid_active_column == 0
    assert state.aria_grid_is_editing
    assert _cell(state, 0, 1)["content"] == "Bergen"


def test_body_keydown_moves_rows_under_aria_roving(load) -> None:
    state = load(row_selection="aria-roving")
    state.handle_aria_grid_cell_keydown("ArrowRight")
    assert state.aria_grid_active_column == 0
    state.handle_aria_grid_cell_keydown("ArrowDown")
    assert state.aria_grid_active_row == 1
    assert state.aria_grid_rows[1]["tab_index"] == 0


def test_hooks_receive_edits_and_filters(load) -> None:
    state = load(AuditedSheetState)
    state.handle_aria_grid_filter(0, "a")
    state.handle_aria_grid_filter(1, "o")
    assert state.filter_counts == [1, 2]

    state.handle_aria_grid_cell_double_click()
    state.handle_aria_grid_input_change("Carla")
    state.handle_aria_grid_input_keydown("Enter", {"shift_key": False})
    assert state.edits == ["Carla"]
    assert _cell(state, 0, 0)["content"] == "Carla"


def test_write_back_follows_the_sorted_view(load) -> None:
    state = load()
    state.handle_aria_grid_sort(0)
    assert _cell(state, 0, 0)["content"] == "alice"
    state._aria_grid_write_back(EditCellEvent(column=2, row=0, value="first"))
    assert _cell(state, 0, 2)["content"] == "a"
    state._sync_aria_grid()
    assert _cell(state, 0, 2)["content"] == "first"
    assert state._aria_grid().rows[1][2] == "first"


def test_select_all_publishes_aggregate(load) -> None:
    state = load(row_selection="checkbox")
    state.handle_aria_grid_row_select(0, True)
    assert state.aria_grid_selection_state == "indeterminate"
    state.handle_aria_grid_select_all(True)
    assert state.aria_grid_selection_state == "true"
    assert state.aria_grid_selected_count == 4


# ---------------------------------------------------------------------------
# Grid registry
# ---------------------------------------------------------------------------


def test_registry_evicts_least_recently_used(monkeypatch) -> None:
    monkeypatch.setattr(grid_state, "MAX_GRIDS", 2)
    monkeypatch.setattr(grid_state, "_grid_registry", OrderedDict())
    first = _get_grid("a")
    _get_grid("b")
    assert _get_grid("a") is first
    _get_grid("c")
    assert list(grid_state._grid_registry) == ["a", "c"]


def test_evicted_grid_reports_expiry(load) -> None:
    state = load()
    grid_state._grid_registry.pop(state._aria_grid_id)
    state.handle_aria_grid_sort(0)
    assert not state.aria_grid_loaded
    assert "expired" in state.aria_grid_status
    assert state.aria_grid_rows == []


def test_release_drops_the_grid(load) -> None:
    state = load()
    grid_id = state._aria_grid_id
    assert grid_id in grid_state._grid_registry
    state.release_aria_grid()
    assert grid_id not in grid_state._grid_registry
    assert not state.aria_grid_loaded
