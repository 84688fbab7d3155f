"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level runtime logs through `loguru`.
- Keep logs on stderr so stdout carries only processed source text.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class RunLogger:
    """Emit deterministic phase logs for CLI-observable pipeline activity.

    The threshold defaults to `ERROR`; `DEBUG` surfaces per-stage progress.
    """

    def __init__(self, sink: TextIO | None = None, level: str = "ERROR") -> None:
        """Initialize the logger sink and minimum level."""

        self._sink = sink or sys.stderr
        self.level = level.upper()
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=self.level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_event(self, stage: str, event: str, **context: object) -> None:
        """Emit a debug-level runtime event with optional context."""

        self._emit("DEBUG", event, stage, **context)

    def log_stage_start(self, stage: str) -> None:
        """Emit a stage-start runtime event."""

        self._emit("DEBUG", "start", stage)

    def log_stage_complete(self, stage: str) -> None:
        """Emit a stage-complete runtime event."""

        self._emit("DEBUG", "complete", stage)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure runtime event without source payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
