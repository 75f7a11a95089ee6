"""Tests for the ``reflex-aria-grid`` CLI."""

from pathlib import Path

from typer.testing import CliRunner

from reflex_aria_grid import cli
from reflex_aria_grid.cli import _build_app_code, _detect_format, app

runner = CliRunner()


def test_missing_file_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["view", str(tmp_path / "missing.csv")])
    assert result.exit_code == 1
    assert "file not found" in result.output


def test_unsupported_extension_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    result = runner.invoke(app, ["view", str(path)])
    assert result.exit_code == 1
    assert "unsupported file extension" in result.output


def test_bad_row_selection_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "data.csv"
    path.write_text("a\n1\n")
    result = runner.invoke(app, ["view", str(path), "--row-selection", "lasso"])
    assert result.exit_code == 2


def test_detect_format() -> None:
    assert _detect_format(Path("a.CSV")) == "csv"
    assert _detect_format(Path("a.feather")) == "ipc"
    assert _detect_format(Path("a.vcf")) is None


def test_build_app_code(tmp_path: Path) -> None:
    path = tmp_path / "data.csv"
    code = _build_app_code(path, 100, 'My "grid"', "checkbox", True)
    assert str(path.resolve()) in code
    assert "cells[:100]" in code
    assert 'row_selection="checkbox"' in code
    assert "edit_on_click=True" in code
    assert 'labelled_by="grid-title"' in code
    assert 'My \\"grid\\"' in code
    assert "__" + "TITLE__" not in code
    compile(code, "viewer_app.py", "exec")


def test_help_lists_view_subcommand() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "view" in result.output


def test_view_writes_app_and_launches_reflex(tmp_path: Path, monkeypatch) -> None:
    data = tmp_path / "data.csv"
    data.write_text("name,city\nalice,Lima\n")
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    commands: list[list[str]] = []

    monkeypatch.setattr(cli.tempfile, "mkdtemp", lambda prefix: str(app_dir))
    monkeypatch.setattr(cli.os, "chdir", lambda path: None)
    monkeypatch.setattr(cli.subprocess, "run", lambda args, **kwargs: commands.append(args))
    monkeypatch.setattr(cli.os, "execvp", lambda file, args: commands.append(args))

    result = runner.invoke(
        app, ["view", str(data), "--row-selection", "aria-roving", "--port", "3123"]
    )

    assert result.exit_code == 0, result.output
    code = (app_dir / "viewer_app" / "viewer_app.py").read_text()
    assert 'row_selection="aria-roving"' in code
    assert "frontend_port=3123" in (app_dir / "rxconfig.py").read_text()
    assert [args[-1] for args in commands] == ["init", "run"]
