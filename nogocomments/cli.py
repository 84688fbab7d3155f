"""Command-line interface for nogocomments.

Responsibilities:
- Select the input source (file or clipboard) from CLI flags.
- Run the comment-removal pipeline and print the result to stdout.
- Render failures as concise diagnostics with exit code 1.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_processed_text,
    echo_version,
    exit_with_command_error,
    exit_with_input_error,
    exit_with_usage,
)
from .config import ConfigLoader, RemoverConfig
from .errors import PipelineStageError
from .io.clipboard import read_clipboard
from .io.file_reader import read_source_file
from .pipeline import CommentRemover
from .telemetry.logger import RunLogger

COMMAND_NAME = "nogocomments"

app = typer.Typer(
    name=COMMAND_NAME,
    add_completion=False,
    help="Remove comments from Go source code.",
)


def _version_callback(value: bool) -> None:
    """Print version information and stop before any input is read."""

    if value:
        echo_version()
        raise typer.Exit()


def _load_config(input_file: Path | None, paste: bool, debug: bool) -> RemoverConfig:
    """Resolve CLI flags and environment into a config, mapping bad values to stage errors."""

    try:
        return ConfigLoader.from_cli(input_file=input_file, paste=paste, debug=debug)
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=str(exc),
            hint="Unset the variable or use `true`/`false`.",
        ) from exc


def _read_input(config: RemoverConfig, run_logger: RunLogger) -> str:
    """Read source text from the selected input; a file path wins over the clipboard."""

    if config.input_file is not None:
        run_logger.log_event("input", "select", source="file", file=config.input_file)
        return read_source_file(config.input_file)
    run_logger.log_event("input", "select", source="clipboard")
    return read_clipboard()


@app.command()
def remove(
    ctx: typer.Context,
    input_file: Annotated[
        Path | None,
        typer.Option("--file", help="File path to read text from."),
    ] = None,
    paste: Annotated[
        bool,
        typer.Option("--paste", help="Read text from clipboard."),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging level."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Display version information.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Print Go source from a file or the clipboard with all comments removed."""

    try:
        config = _load_config(input_file, paste, debug)
    except PipelineStageError as exc:
        exit_with_command_error(COMMAND_NAME, exc)

    if config.input_source is None:
        exit_with_usage(ctx.get_help())

    run_logger = RunLogger(level=config.log_level)
    try:
        text = _read_input(config, run_logger)
    except Exception as exc:
        run_logger.log_stage_failure("input", type(exc).__name__)
        exit_with_input_error(exc)

    try:
        processed = CommentRemover(run_logger=run_logger).remove_comments(text)
    except Exception as exc:
        exit_with_command_error(COMMAND_NAME, exc)

    echo_processed_text(processed)
    run_logger.log_event("cli", "complete")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
