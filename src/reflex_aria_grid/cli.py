"""CLI for reflex-aria-grid -- open a tabular file in an accessible browser grid.

Usage::

    # View a CSV / TSV / Parquet file
    reflex-aria-grid view data.csv

    # Only the first rows, with a checkbox selection column
    reflex-aria-grid view big_file.parquet --limit 500 --row-selection checkbox

The generated app loads the file with ``load_table`` and renders it through
``AriaGridMixin`` + ``aria_grid``; sorting, filtering, selection and cell
editing all run on the server.
"""

import os
import subprocess
import sys
import tempfile
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer

app = typer.Typer(
    name="reflex-aria-grid",
    help="View tabular data files in an accessible, keyboard-driven browser grid.",
    no_args_is_help=True,
)


@app.callback()
def callback() -> None:
    """View tabular data files in an accessible, keyboard-driven browser grid."""


_FORMAT_MAP: dict[str, str] = {
    ".csv": "csv",
    ".tsv": "tsv",
    ".parquet": "parquet",
    ".pq": "parquet",
    ".json": "json",
    ".ndjson": "ndjson",
    ".jsonl": "ndjson",
    ".ipc": "ipc",
    ".arrow": "ipc",
    ".feather": "ipc",
}


class RowSelection(str, Enum):
    """Row selection patterns accepted by ``--row-selection``."""

    none = "none"
    checkbox = "checkbox"
    aria_roving = "aria-roving"


def _detect_format(path: Path) -> str | None:
    """Detect file format from extension; ``None`` when unsupported."""
    return _FORMAT_MAP.get(path.suffix.lower())


def _build_app_code(
    file_path: Path,
    limit: int | None,
    title: str,
    row_selection: str,
    edit_on_click: bool,
) -> str:
    """Generate the Reflex app module source code."""
    abs_path = str(file_path.resolve())
    # Escape backslashes and quotes for embedding in Python string literal
    safe_path = abs_path.replace("\\", "\\\\").replace('"', '\\"')

    limit_slice = f"[:{limit}]" if limit else ""

    # Placeholder substitution keeps the template readable.
    template = _APP_TEMPLATE
    template = template.replace("__FILENAME__", file_path.name)
    template = template.replace("__SAFE_PATH__", safe_path)
    template = template.replace("__LIMIT_SLICE__", limit_slice)
    template = template.replace("__TITLE__", title.replace('"', '\\"'))
    template = template.replace("__ROW_SELECTION__", row_selection)
    template = template.replace("__EDIT_ON_CLICK__", repr(edit_on_click))
    return template


# ---------------------------------------------------------------------------
# App template -- uses __PLACEHOLDER__ tokens for dynamic parts.
# ---------------------------------------------------------------------------

_APP_TEMPLATE = '''"""Auto-generated viewer app for: __FILENAME__"""

from pathlib import Path

import reflex as rx

from reflex_aria_grid import (
    AriaGridMixin,
    GridConfig,
    aria_grid,
    aria_grid_status_bar,
    load_table,
)


class ViewerState(AriaGridMixin, rx.State):
    """Viewer state holding one grid per browser tab."""

    def load_data(self):
        cells, columns = load_table(Path("__SAFE_PATH__"))
        config = GridConfig(
            grid_type="grid",
            row_selection="__ROW_SELECTION__",
            edit_on_click=__EDIT_ON_CLICK__,
            labelled_by="grid-title",
        )
        self.set_grid_data(cells__LIMIT_SLICE__, columns, config)


def index() -> rx.Component:
    return rx.box(
        rx.heading("__TITLE__", id="grid-title", size="6", margin_bottom="0.5em"),
        rx.cond(
            ViewerState.aria_grid_loaded,
            rx.fragment(
                aria_grid_status_bar(ViewerState),
                aria_grid(ViewerState),
            ),
            rx.text("Loading...", color="var(--gray-9)"),
        ),
        padding="2em",
        max_width="1400px",
        margin="0 auto",
    )


app = rx.App()
app.add_page(index, on_load=ViewerState.load_data)
'''


@app.command()
def view(
    file: Annotated[Path, typer.Argument(help="Path to the data file (CSV, TSV, Parquet, JSON, etc.)")],
    limit: Annotated[Optional[int], typer.Option("--limit", "-n", help="Maximum number of rows to load")] = None,
    port: Annotated[int, typer.Option("--port", "-p", help="Port for the Reflex frontend")] = 3000,
    title: Annotated[Optional[str], typer.Option("--title", "-t", help="Page title")] = None,
    row_selection: Annotated[
        RowSelection,
        typer.Option("--row-selection", "-s", help="Row selection pattern"),
    ] = RowSelection.none,
    edit_on_click: Annotated[
        bool, typer.Option("--edit-on-click", help="Enter edit mode on a single click")
    ] = False,
) -> None:
    """View a data file in an interactive, accessible browser grid.

    Supports: CSV, TSV, Parquet, JSON, NDJSON, IPC/Arrow/Feather.
    """
    file = file.resolve()
    if not file.exists():
        typer.echo(f"Error: file not found: {file}", err=True)
        raise typer.Exit(code=1)

    fmt = _detect_format(file)
    if fmt is None:
        typer.echo(f"Error: unsupported file extension: {file.suffix or file.name}", err=True)
        raise typer.Exit(code=1)

    if title is None:
        title = f"{file.name} -- Grid Viewer"

    app_code = _build_app_code(file, limit, title, row_selection.value, edit_on_click)

    # Create a temporary Reflex app directory.
    tmp_dir = Path(tempfile.mkdtemp(prefix="aria_grid_viewer_"))
    app_name = "viewer_app"
    app_pkg = tmp_dir / app_name
    app_pkg.mkdir()
    (app_pkg / "__init__.py").write_text("")
    (app_pkg / f"{app_name}.py").write_text(app_code)

    rxconfig_code = f"""import reflex as rx
config = rx.Config(app_name="{app_name}", frontend_port={port})
"""
    (tmp_dir / "rxconfig.py").write_text(rxconfig_code)

    typer.echo(f"Launching viewer for: {file}")
    typer.echo(f"Format: {fmt} | Limit: {limit or 'all'} | Port: {port}")

    os.chdir(tmp_dir)

    # reflex's CLI calls sys.exit() on completion, hence the subprocess.
    typer.echo("Initializing Reflex project...")
    subprocess.run(
        [sys.executable, "-m", "reflex", "init"],
        cwd=str(tmp_dir),
        check=True,
    )

    typer.echo("Starting viewer...")
    os.execvp(sys.executable, [sys.executable, "-m", "reflex", "run"])


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
