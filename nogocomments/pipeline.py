"""Comment-removal pipeline.

Responsibilities:
- Define the fixed stage order `normalize -> parse -> strip -> render -> restore`.
- Thread the injected-prefix flag through exactly one call.
- Map foreign backend failures onto stage-scoped errors.

Key types:
- `CommentRemover`: orchestration facade over a pluggable syntax backend.
- `remove_comments`: convenience wrapper using the default Go backend.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from .errors import FormatError, ParseError, PipelineStageError
from .syntax.backend import SyntaxBackend
from .syntax.go_backend import GoSyntaxBackend
from .telemetry.logger import RunLogger
from .text.snippet import SnippetNormalizer, SnippetRestorer

_StageResult = TypeVar("_StageResult")


class CommentRemover:
    """Strip comments from source text through parse and canonical reprint."""

    STAGE_SEQUENCE = ("normalize", "parse", "strip", "render", "restore")

    def __init__(
        self,
        backend: SyntaxBackend[Any] | None = None,
        normalizer: SnippetNormalizer | None = None,
        restorer: SnippetRestorer | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize stage collaborators, defaulting to the Go backend."""

        self._backend = backend if backend is not None else GoSyntaxBackend()
        self._normalizer = normalizer or SnippetNormalizer()
        self._restorer = restorer or SnippetRestorer(self._normalizer.prefix)
        self._run_logger = run_logger

    def remove_comments(self, source: str) -> str:
        """Return `source` without comments, canonically formatted.

        Raises:
            ParseError: If the (possibly prefixed) text is not valid source.
            FormatError: If the parsed tree cannot be printed.
        """

        snippet = self._run_stage("normalize", lambda: self._normalizer.normalize(source))
        tree = self._run_stage("parse", lambda: self._parse(snippet.text))
        self._run_stage("strip", lambda: self._backend.strip_comments(tree))
        rendered = self._run_stage("render", lambda: self._render(tree))
        return self._run_stage(
            "restore", lambda: self._restorer.restore(rendered, snippet.injected)
        )

    def _parse(self, text: str) -> Any:
        try:
            return self._backend.parse(text)
        except PipelineStageError:
            raise
        except Exception as exc:
            raise ParseError(f"error parsing source code: {exc}") from exc

    def _render(self, tree: Any) -> str:
        try:
            return self._backend.render(tree)
        except PipelineStageError:
            raise
        except Exception as exc:
            raise FormatError(f"error formatting source code: {exc}") from exc

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events."""

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name)
        return result


def remove_comments(source: str) -> str:
    """Strip comments from Go source or a Go snippet with the default backend."""

    return CommentRemover().remove_comments(source)
