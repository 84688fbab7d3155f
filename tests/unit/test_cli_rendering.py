"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from nogocomments import __version__
from nogocomments.cli_rendering import (
    echo_processed_text,
    echo_version,
    exit_with_command_error,
    exit_with_input_error,
)
from nogocomments.errors import InputReadError, ParseError


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = ParseError("syntax error: unexpected '}'", line=2, column=1)

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("nogocomments", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "nogocomments failed at stage `parse`: 2:1: syntax error" in captured.err
    assert "Hint: incomplete or non-go source code in input" in captured.err
    assert captured.out == ""


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("nogocomments", RuntimeError("unexpected"))

    assert exc_info.value.exit_code == 1
    assert "nogocomments failed: unexpected" in capsys.readouterr().err


def test_exit_with_input_error_prefixes_read_failure(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Read failures should be reported as failing to read input."""

    with pytest.raises(typer.Exit):
        exit_with_input_error(InputReadError("failed to read from clipboard: busy"))

    assert "failed to read input: failed to read from clipboard: busy" in capsys.readouterr().err


def test_echo_version_prints_build_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """Version output should name the tool, version, copyright, and license."""

    echo_version()

    out = capsys.readouterr().out
    assert out.startswith("nogocomments - Removes comments from Go code.\n\n")
    assert f"Version {__version__} - Build Date " in out
    assert "Copyright (c) " in out
    assert out.endswith("Distributed under the MIT License\n")


def test_echo_processed_text_appends_newline(capsysbinary: pytest.CaptureFixture[bytes]) -> None:
    """Processed text should be written as-is plus a newline, raw bytes included."""

    echo_processed_text('var s = "\udce9"\n')

    assert capsysbinary.readouterr().out == b'var s = "\xe9"\n\n'
