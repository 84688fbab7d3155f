"""Domain exceptions for pipeline and CLI diagnostics."""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a specific pipeline stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ParseError(PipelineStageError):
    """Raised when input is not a syntactically valid compilation unit.

    Attributes:
        line: 1-based line of the first offending token, when known.
        column: 1-based byte column of the first offending token, when known.
    """

    def __init__(
        self,
        detail: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize a parse failure with an optional source position."""

        if line is not None and column is not None:
            detail = f"{line}:{column}: {detail}"
        super().__init__(
            stage="parse",
            detail=detail,
            hint="incomplete or non-go source code in input",
        )
        self.line = line
        self.column = column


class FormatError(PipelineStageError):
    """Raised when a parsed syntax tree cannot be printed back to source."""

    def __init__(self, detail: str) -> None:
        """Initialize a printer failure."""

        super().__init__(stage="format", detail=detail)


class InputReadError(PipelineStageError):
    """Raised when the file or clipboard collaborator cannot supply text."""

    def __init__(self, detail: str, *, hint: str | None = None) -> None:
        """Initialize an input failure with an optional recovery hint."""

        super().__init__(stage="input", detail=detail, hint=hint)
