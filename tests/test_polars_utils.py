"""Tests for the polars helpers: grid frames, host-side filters and file loading."""

from pathlib import Path

import polars as pl
import pytest

from reflex_aria_grid.polars_utils import (
    ROW_ID_FIELD,
    apply_text_filters,
    cells_to_frame,
    frame_row_ids,
    frame_to_cells,
    load_table,
)


def test_cells_to_frame_pads_ragged_rows() -> None:
    frame = cells_to_frame([["a", "b"], ["c"], ["d", None, "ignored"]], [7, 8, 9], 2)
    assert frame.columns == [ROW_ID_FIELD, "col_0", "col_1"]
    assert frame.schema[ROW_ID_FIELD] == pl.Int64
    assert frame_to_cells(frame) == [["a", "b"], ["c", ""], ["d", ""]]
    assert frame_row_ids(frame) == [7, 8, 9]


def test_zero_columns() -> None:
    frame = cells_to_frame([[], []], [0, 1], 0)
    assert frame_to_cells(frame) == [[], []]


def test_apply_text_filters() -> None:
    frame = cells_to_frame(
        [["Alice", "Oslo"], ["Bob", "Lima"], ["alina", "Lisbon"]],
        [0, 1, 2],
        2,
    )
    assert frame_to_cells(apply_text_filters(frame, {0: " AL "})) == [["Alice", "Oslo"], ["alina", "Lisbon"]]
    assert frame_to_cells(apply_text_filters(frame, {0: "al", 1: "lis"})) == [["alina", "Lisbon"]]
    assert apply_text_filters(frame, {0: "  ", 5: "x"}) is frame


def test_load_csv(tmp_path: Path) -> None:
    path = tmp_path / "people.csv"
    path.write_text("name,age\nAlice,30\nBob,\n")
    cells, columns = load_table(path)
    assert [column.name for column in columns] == ["name", "age"]
    assert all(column.sortable and column.filterable for column in columns)
    assert cells == [["Alice", "30"], ["Bob", ""]]


def test_load_parquet_casts_to_strings(tmp_path: Path) -> None:
    path = tmp_path / "data.parquet"
    pl.DataFrame({"n": [1, None], "tags": [["a", "b"], []]}).write_parquet(path)
    cells, _ = load_table(path)
    assert cells == [["1", "a,b"], ["", ""]]


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_table(tmp_path / "missing.csv")


def test_load_unsupported_extension(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    with pytest.raises(ValueError, match="Unsupported file extension"):
        load_table(path)
