"""Tests for the grid event bus."""

from reflex_aria_grid.events import EditCellEvent, FilterEvent, GridEventBus


def test_handlers_receive_only_their_type() -> None:
    bus = GridEventBus()
    edits: list[EditCellEvent] = []
    filters: list[FilterEvent] = []
    bus.subscribe(EditCellEvent, edits.append)
    bus.subscribe(FilterEvent, filters.append)

    bus.emit(EditCellEvent(column=0, row=1, value="v"))
    assert edits == [EditCellEvent(column=0, row=1, value="v")]
    assert filters == []


def test_unsubscribe() -> None:
    bus = GridEventBus()
    received: list[FilterEvent] = []
    unsubscribe = bus.subscribe(FilterEvent, received.append)
    unsubscribe()
    unsubscribe()
    bus.emit(FilterEvent({0: "x"}))
    assert received == []
