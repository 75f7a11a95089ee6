"""Tests for the edit session state machine."""

from reflex_aria_grid.edit_session import EditSession, FocusEffect
from reflex_aria_grid.models import Cell, GridConfig


def test_escape_suppresses_next_commit_and_requests_focus() -> None:
    session = EditSession(GridConfig())
    session.enter_edit(True)
    session.drain_effects()

    session.cancel()
    assert not session.is_editing
    assert session.drain_effects() == [FocusEffect("focus", Cell(0, 0))]
    assert session.commit(0, 0, "foo") is None
    # The guard is one-shot.
    assert session.commit(0, 0, "foo") is not None


def test_enter_edit_requests_focus_and_text_select() -> None:
    session = EditSession(GridConfig())
    assert session.enter_edit(True)
    assert session.drain_effects() == [
        FocusEffect("focus", Cell(0, 0)),
        FocusEffect("select_text", Cell(0, 0)),
    ]


def test_drain_is_idempotent() -> None:
    session = EditSession(GridConfig())
    session.move_active_cell(Cell(1, 2))
    assert session.drain_effects() == [FocusEffect("focus", Cell(1, 2))]
    assert session.drain_effects() == []
    assert not session.has_pending_effects


def test_not_editable_is_a_noop() -> None:
    session = EditSession(GridConfig(editable=False))
    assert not session.enter_edit(True)
    assert not session.is_editing
    assert not session.has_pending_effects


def test_simple_editable_allows_editing() -> None:
    session = EditSession(GridConfig(editable=False, simple_editable=True))
    assert session.enter_edit(False)


def test_new_edit_clears_stale_guard() -> None:
    session = EditSession(GridConfig())
    session.enter_edit(True)
    session.cancel()
    session.enter_edit(True)
    assert session.commit(0, 0, "bar") is not None


def test_set_active_cell_makes_no_focus_request() -> None:
    session = EditSession(GridConfig())
    session.set_active_cell(Cell(2, 3))
    assert session.active_cell == Cell(2, 3)
    assert not session.has_pending_effects
    assert not session.move_active_cell(Cell(2, 3))
