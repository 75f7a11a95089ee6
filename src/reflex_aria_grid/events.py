"""Outbound grid messages and the observer bus that delivers them."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar


@dataclass(frozen=True)
class FilterEvent:
    """Filter text per column index; sent on every filter input change."""

    filters: dict[int, str]


@dataclass(frozen=True)
class RowSelectEvent:
    """One row's selection flag changed (also sent per row on select-all)."""

    row_id: int
    row: Sequence[Any]
    selected: bool


@dataclass(frozen=True)
class EditCellEvent:
    """A committed edit.

    ``column`` is the data column index (checkbox column not counted) and
    ``row`` the row position in the sorted view.
    """

    column: int
    row: int
    value: str
    row_id: int | None = None


GridEvent = FilterEvent | RowSelectEvent | EditCellEvent
E = TypeVar("E", FilterEvent, RowSelectEvent, EditCellEvent)


class GridEventBus:
    """Synchronous observer registry keyed by event type."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: type[E], handler: Callable[[E], None]) -> Callable[[], None]:
        """Call *handler* for every emitted *event_type*; returns an unsubscribe callable."""
        handlers = self._handlers.setdefault(event_type, [])
        handlers.append(handler)

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, event: GridEvent) -> None:
        for handler in list(self._handlers.get(type(event), [])):
            handler(event)
