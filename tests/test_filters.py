"""Tests for the filter registry."""

from reflex_aria_grid.filters import FilterRegistry
from reflex_aria_grid.models import GridColumn

COLUMNS = [
    GridColumn(name="a", filterable=True),
    GridColumn(name="b"),
    GridColumn(name="c", filterable=True),
]
COLUMN_IDS = [10, 11, 12]


def test_excludes_non_filterable_and_blank() -> None:
    registry = FilterRegistry()
    registry.set_text(10, "x")
    registry.set_text(11, "ignored")
    registry.set_text(12, "   ")
    assert registry.filter_set(COLUMNS, COLUMN_IDS) == {0: "x"}


def test_text_is_emitted_untrimmed() -> None:
    registry = FilterRegistry()
    registry.set_text(12, " oslo ")
    assert registry.filter_set(COLUMNS, COLUMN_IDS) == {2: " oslo "}


def test_text_follows_column_identity() -> None:
    registry = FilterRegistry()
    registry.set_text(12, "z")
    reordered = [COLUMNS[2], COLUMNS[0]]
    assert registry.filter_set(reordered, [12, 10]) == {0: "z"}


def test_rebuild_drops_removed_columns() -> None:
    registry = FilterRegistry()
    registry.set_text(10, "x")
    registry.set_text(12, "y")
    registry.rebuild([12])
    assert registry.text(10) == ""
    assert registry.text(12) == "y"
