"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for processed text,
version information, usage, and failure diagnostics.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from . import BUILD_DATE, COPYRIGHT_YEAR, __version__
from .errors import PipelineStageError


def _echo_hint(exc: Exception) -> None:
    hint = getattr(exc, "hint", None)
    if hint:
        typer.secho(f"Hint: {hint}", fg=typer.colors.YELLOW, err=True)


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        _echo_hint(exc)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def exit_with_input_error(exc: Exception) -> NoReturn:
    """Print a read-failure diagnostic and exit with code 1."""

    detail = exc.detail if isinstance(exc, PipelineStageError) else str(exc)
    typer.secho(f"failed to read input: {detail}", fg=typer.colors.RED, err=True)
    _echo_hint(exc)
    raise typer.Exit(code=1) from exc


def exit_with_usage(usage: str) -> NoReturn:
    """Print usage to stderr and exit with code 1 when no input is selected."""

    typer.echo(usage, err=True)
    typer.secho(
        "No input method specified: pass `--file <path>` or `--paste`.",
        fg=typer.colors.RED,
        err=True,
    )
    raise typer.Exit(code=1)


def echo_version() -> None:
    """Print name, version, build metadata, copyright and license lines."""

    typer.echo("nogocomments - Removes comments from Go code.")
    typer.echo("")
    typer.echo(f"Version {__version__} - Build Date {BUILD_DATE}")
    typer.echo(f"Copyright (c) {COPYRIGHT_YEAR} Pierow2k")
    typer.echo("Distributed under the MIT License")


def echo_processed_text(text: str) -> None:
    """Print processed source followed by a newline, passing raw bytes through."""

    typer.echo(text.encode("utf-8", errors="surrogateescape"))
