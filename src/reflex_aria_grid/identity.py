"""Stable synthetic ids for rows and columns, assigned by object identity."""

from collections.abc import Sequence
from typing import Any


class IdentityArena:
    """Hands out integer ids to the items of successive data loads.

    An item passed again as the *same object* (``is``) keeps its id; every
    other item gets a fresh, never reused id.  Associations keyed by these
    ids therefore survive a reload only for rows the host kept.

    The previous generation is held until the next :meth:`assign`, so the
    ``id()`` lookups can never hit a recycled address.
    """

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._ids: list[int] = []
        self._next_id: int = 0

    def assign(self, items: Sequence[Any]) -> list[int]:
        """Return one id per item of *items* and make it the current generation."""
        previous = {id(item): (item, item_id) for item, item_id in zip(self._items, self._ids)}
        ids: list[int] = []
        taken: set[int] = set()
        for item in items:
            entry = previous.get(id(item))
            if entry is not None and entry[0] is item and entry[1] not in taken:
                item_id = entry[1]
            else:
                item_id = self._next_id
                self._next_id += 1
            taken.add(item_id)
            ids.append(item_id)

        self._items = list(items)
        self._ids = ids
        return list(ids)
