"""Utilities for moving grid cells in and out of polars DataFrames.

The grid stores its rows in a ``pl.DataFrame`` with one String column per
data column (``col_0``, ``col_1``, ...) and a ``__row_id__`` column holding
the synthetic row identity.  Sorting works on that frame; the helpers here
build it, read it back, and load tables from files.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import polars as pl

from reflex_aria_grid.models import GridColumn

ROW_ID_FIELD: str = "__row_id__"


def cell_field(column: int) -> str:
    """Frame column name for data column *column*."""
    return f"col_{column}"


def data_fields(frame: pl.DataFrame) -> list[str]:
    """Return the data column names of *frame*, in order, without the row id."""
    return [name for name in frame.columns if name != ROW_ID_FIELD]


def _cell_value(row: Sequence[Any], column: int) -> str:
    """Return the string at *column*, or ``""`` for short rows and nulls."""
    if column >= len(row) or row[column] is None:
        return ""
    return str(row[column])


def cells_to_frame(
    rows: Sequence[Sequence[Any]],
    row_ids: Sequence[int],
    column_count: int,
) -> pl.DataFrame:
    """Build the grid frame from row-major *rows*.

    Rows shorter than *column_count* are padded with empty strings and
    longer rows are truncated, so a ragged matrix degrades instead of
    failing.

    Args:
        rows: Ordered rows of cell values (normally strings).
        row_ids: One synthetic identity per row.
        column_count: Number of data columns.

    Returns:
        A frame with ``__row_id__`` first, then ``col_0 .. col_{n-1}``.
    """
    data: dict[str, list[Any]] = {ROW_ID_FIELD: list(row_ids)}
    schema: dict[str, pl.DataType] = {ROW_ID_FIELD: pl.Int64()}
    for column in range(column_count):
        name = cell_field(column)
        data[name] = [_cell_value(row, column) for row in rows]
        schema[name] = pl.String()
    return pl.DataFrame(data, schema=schema)


def frame_to_cells(frame: pl.DataFrame) -> list[list[str]]:
    """Return the data cells of *frame* as a list of row lists."""
    fields = data_fields(frame)
    if not fields:
        return [[] for _ in range(frame.height)]
    return [list(row) for row in frame.select(fields).rows()]


def frame_row_ids(frame: pl.DataFrame) -> list[int]:
    """Return the row identities of *frame*, in frame order."""
    return frame[ROW_ID_FIELD].to_list()


# ---------------------------------------------------------------------------
# Host-side filtering
# ---------------------------------------------------------------------------

def apply_text_filters(frame: pl.DataFrame, filters: dict[int, str]) -> pl.DataFrame:
    """Keep the rows of *frame* matching every entry of a filter set.

    The grid itself never filters rows: it only emits the filter set.
    This helper is for hosts that want the usual behavior, a
    case-insensitive substring match of the trimmed text per column,
    combined with AND.

    Args:
        frame: A grid frame (see :func:`cells_to_frame`).
        filters: ``{column_index: text}`` as emitted by the grid.

    Returns:
        The filtered ``pl.DataFrame``.  Entries naming unknown columns or
        holding blank text are skipped.
    """
    exprs: list[pl.Expr] = []
    for column, text in filters.items():
        name = cell_field(column)
        needle = text.strip().lower()
        if name not in frame.columns or not needle:
            continue
        exprs.append(pl.col(name).str.to_lowercase().str.contains(needle, literal=True))

    if not exprs:
        return frame
    return frame.filter(pl.all_horizontal(exprs))


# ---------------------------------------------------------------------------
# File loading
# ---------------------------------------------------------------------------

def _col_to_str_expr(col: pl.Expr, dtype: pl.DataType) -> pl.Expr:
    """Convert a column expression to a String, handling List/Array types.

    * ``List(T)`` / ``Array(T, n)`` -> cast inner to String, then ``list.join(",")``
    * Everything else -> ``cast(pl.String)``
    """
    if isinstance(dtype, (pl.List, pl.Array)):
        return col.cast(pl.List(pl.String)).list.join(",")
    return col.cast(pl.String)


def load_table(path: Path) -> tuple[list[list[str]], list[GridColumn]]:
    """Read a data file into ``(cells, columns)`` ready for the grid.

    Auto-detects the file format from the extension:

    * ``.csv`` -- ``pl.read_csv()`` with schema inference off.
    * ``.tsv`` -- ``pl.read_csv(separator="\\t")``.
    * ``.parquet`` / ``.pq`` -- ``pl.read_parquet()``.
    * ``.json`` -- ``pl.read_json()``.
    * ``.ndjson`` / ``.jsonl`` -- ``pl.read_ndjson()``.
    * ``.ipc`` / ``.arrow`` / ``.feather`` -- ``pl.read_ipc()``.

    Every column is cast to String (nulls become ``""``) and described by
    a sortable, filterable :class:`GridColumn`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file extension is not recognised.
    """
    path = Path(path).resolve()
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pl.read_csv(path, infer_schema=False)
    elif suffix == ".tsv":
        df = pl.read_csv(path, separator="\t", infer_schema=False)
    elif suffix in (".parquet", ".pq"):
        df = pl.read_parquet(path)
    elif suffix == ".json":
        df = pl.read_json(path)
    elif suffix in (".ndjson", ".jsonl"):
        df = pl.read_ndjson(path)
    elif suffix in (".ipc", ".arrow", ".feather"):
        df = pl.read_ipc(path)
    else:
        raise ValueError(
            f"Unsupported file extension: {suffix!r}. "
            "Supported: .csv, .tsv, .parquet, .pq, .json, .ndjson, .jsonl, "
            ".ipc, .arrow, .feather"
        )

    df = df.select(
        [_col_to_str_expr(pl.col(name), dtype).fill_null("") for name, dtype in df.schema.items()]
    )
    columns = [GridColumn(name=name, sortable=True, filterable=True) for name in df.columns]
    cells = [list(row) for row in df.rows()]
    return cells, columns
