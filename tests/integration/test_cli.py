"""CLI tests for input selection, output, and diagnostics."""

from __future__ import annotations

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from nogocomments import __version__
from nogocomments.cli import app
from nogocomments.errors import InputReadError


def _write_source(tmp_path: Path, text: str) -> Path:
    """Write Go source to a temporary file and return its path."""

    path = tmp_path / "main.go"
    path.write_text(text, encoding="utf-8")
    return path


def test_version_prints_metadata_and_exits_zero() -> None:
    """`--version` should print build metadata without requiring an input."""

    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "nogocomments - Removes comments from Go code." in result.output
    assert f"Version {__version__}" in result.output
    assert "Distributed under the MIT License" in result.output


def test_missing_input_method_prints_usage_and_fails() -> None:
    """Running without `--file` or `--paste` should print usage and exit 1."""

    result = CliRunner().invoke(app, [])

    assert result.exit_code == 1
    assert "Usage:" in result.output
    assert "--file" in result.output
    assert "--paste" in result.output


def test_file_input_prints_processed_text(tmp_path: Path) -> None:
    """Comments should be removed from a file and the result printed to stdout."""

    path = _write_source(
        tmp_path,
        "package main\n\n// Entry point.\nfunc main(){\n\tprintln(1) // one\n}\n",
    )

    result = CliRunner().invoke(app, ["--file", str(path)])

    assert result.exit_code == 0
    assert result.output == "package main\n\nfunc main() {\n\tprintln(1)\n}\n\n"


def test_file_input_accepts_bare_snippet(tmp_path: Path) -> None:
    """Snippets without a package clause should print without the synthetic clause."""

    path = _write_source(tmp_path, "// hello\nfunc f(){}\n")

    result = CliRunner().invoke(app, ["--file", str(path)])

    assert result.exit_code == 0
    assert result.output == "\nfunc f()\t{}\n\n"


def test_file_wins_over_paste(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    """When both flags are given the clipboard should not be read."""

    def _unexpected_clipboard() -> str:
        raise AssertionError("clipboard should not be read")

    monkeypatch.setattr("nogocomments.cli.read_clipboard", _unexpected_clipboard)
    path = _write_source(tmp_path, "package main\n")

    result = CliRunner().invoke(app, ["--file", str(path), "--paste"])

    assert result.exit_code == 0
    assert result.output == "package main\n\n"


def test_paste_input_reads_clipboard(monkeypatch: MonkeyPatch) -> None:
    """`--paste` should process clipboard text."""

    monkeypatch.setattr("nogocomments.cli.read_clipboard", lambda: "var x = 1 // set\n")

    result = CliRunner().invoke(app, ["--paste"])

    assert result.exit_code == 0
    assert "var x = 1" in result.output
    assert "// set" not in result.output


def test_missing_file_reports_read_failure(tmp_path: Path) -> None:
    """An unreadable file should report a read failure and exit 1."""

    result = CliRunner().invoke(app, ["--file", str(tmp_path / "missing.go")])

    assert result.exit_code == 1
    assert "failed to read input:" in result.output
    assert "missing.go" in result.output


def test_clipboard_failure_reports_read_failure(monkeypatch: MonkeyPatch) -> None:
    """Clipboard errors should be reported as read failures."""

    def _failing_clipboard() -> str:
        raise InputReadError("failed to read from clipboard: no mechanism")

    monkeypatch.setattr("nogocomments.cli.read_clipboard", _failing_clipboard)

    result = CliRunner().invoke(app, ["--paste"])

    assert result.exit_code == 1
    assert "failed to read input: failed to read from clipboard: no mechanism" in result.output


def test_invalid_source_reports_parse_error_with_hint(tmp_path: Path) -> None:
    """Unbalanced source should report a parse-stage failure with the standard hint."""

    path = _write_source(tmp_path, "func main() {\n")

    result = CliRunner().invoke(app, ["--file", str(path)])

    assert result.exit_code == 1
    assert "nogocomments failed at stage `parse`" in result.output
    assert "Hint: incomplete or non-go source code in input" in result.output


def test_debug_flag_logs_stage_events(tmp_path: Path) -> None:
    """`--debug` should emit per-stage log lines alongside the output."""

    path = _write_source(tmp_path, "package main\n")

    result = CliRunner().invoke(app, ["--debug", "--file", str(path)])

    assert result.exit_code == 0
    assert "[phase] level=DEBUG stage=input event=select" in result.output
    assert "[phase] level=DEBUG stage=parse event=start" in result.output
    assert "[phase] level=DEBUG stage=cli event=complete" in result.output


def test_debug_environment_variable_enables_logging(tmp_path: Path) -> None:
    """`NOGOCOMMENTS_DEBUG=true` should behave like `--debug`."""

    path = _write_source(tmp_path, "package main\n")

    result = CliRunner().invoke(app, ["--file", str(path)], env={"NOGOCOMMENTS_DEBUG": "true"})

    assert result.exit_code == 0
    assert "stage=render event=complete" in result.output


def test_invalid_debug_environment_variable_fails(tmp_path: Path) -> None:
    """An unparseable debug variable should fail at the config stage."""

    path = _write_source(tmp_path, "package main\n")

    result = CliRunner().invoke(app, ["--file", str(path)], env={"NOGOCOMMENTS_DEBUG": "maybe"})

    assert result.exit_code == 1
    assert "nogocomments failed at stage `config`" in result.output


def test_module_entrypoint_uses_cli_main() -> None:
    """`python -m nogocomments` should dispatch to the CLI entrypoint."""

    import nogocomments.__main__ as entrypoint
    from nogocomments.cli import main

    assert entrypoint.main is main
