"""Shared fixtures for the grid tests."""

import pytest

from reflex_aria_grid.grid import AriaGrid
from reflex_aria_grid.models import GridColumn, GridConfig


@pytest.fixture
def columns() -> list[GridColumn]:
    return [
        GridColumn(name="Name", sortable=True, filterable=True),
        GridColumn(name="City", sortable=True, filterable=True),
        GridColumn(name="Note"),
    ]


@pytest.fixture
def cells() -> list[list[str]]:
    return [
        ["carol", "Oslo", "c"],
        ["alice", "Lima", "a"],
        ["Bob", "Kyiv", "b"],
        ["dave", "Rome", "d"],
    ]


@pytest.fixture
def make_grid(cells, columns):
    """Build an ``AriaGrid`` over the sample data with config overrides."""

    def _make(**config) -> AriaGrid:
        config.setdefault("grid_type", "grid")
        return AriaGrid(cells, columns, GridConfig(**config))

    return _make
