"""Source file reading.

Responsibilities:
- Read a file line by line and re-join each line with `\\n`.
- Pass undecodable bytes through unchanged via `surrogateescape`.
- Map OS failures onto `InputReadError`.

Key types:
- `FileOpener`: protocol for opening a text stream, substitutable in tests.
- `OsFileOpener`: default opener backed by the filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, TextIO

from ..errors import InputReadError


class FileOpener(Protocol):
    """Open a path for text reading."""

    def open(self, path: Path) -> TextIO:
        """Return a readable text stream for `path`."""


class OsFileOpener:
    """Open files from the local filesystem as UTF-8 text."""

    def open(self, path: Path) -> TextIO:
        return path.open("r", encoding="utf-8", errors="surrogateescape", newline="\n")


def read_source_file(path: Path, opener: FileOpener | None = None) -> str:
    """Return the file's text with every line terminated by a single `\\n`.

    A trailing `\\r` before each line break is dropped, so CRLF input becomes LF.

    Raises:
        InputReadError: If the file cannot be opened or read.
    """

    active_opener = opener if opener is not None else OsFileOpener()
    try:
        with active_opener.open(path) as stream:
            lines = [_strip_line_break(line) for line in stream]
    except OSError as exc:
        raise InputReadError(
            f"failed to read from file `{path}`: {exc.strerror or exc}",
            hint="Check that the path exists and is readable.",
        ) from exc
    except UnicodeError as exc:
        raise InputReadError(f"failed to decode file `{path}`: {exc}") from exc
    return "".join(f"{line}\n" for line in lines)


def _strip_line_break(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
