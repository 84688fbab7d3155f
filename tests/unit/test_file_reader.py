"""Unit tests for source file reading."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from nogocomments.errors import InputReadError
from nogocomments.io.file_reader import read_source_file


def test_read_source_file_terminates_every_line(tmp_path: Path) -> None:
    """Every line, including an unterminated last line, should end with `\\n`."""

    path = tmp_path / "main.go"
    path.write_bytes(b"package main\n\nfunc main() {}")

    assert read_source_file(path) == "package main\n\nfunc main() {}\n"


def test_read_source_file_converts_crlf_line_endings(tmp_path: Path) -> None:
    """Windows line endings should be normalized to `\\n`."""

    path = tmp_path / "main.go"
    path.write_bytes(b"package main\r\n// c\r\n")

    assert read_source_file(path) == "package main\n// c\n"


def test_read_source_file_keeps_lone_carriage_returns(tmp_path: Path) -> None:
    """A carriage return inside a line should not split it."""

    path = tmp_path / "main.go"
    path.write_bytes(b"a\rb\n")

    assert read_source_file(path) == "a\rb\n"


def test_read_source_file_returns_empty_text_for_empty_file(tmp_path: Path) -> None:
    """An empty file should read as empty text."""

    path = tmp_path / "empty.go"
    path.write_bytes(b"")

    assert read_source_file(path) == ""


def test_read_source_file_passes_undecodable_bytes_through(tmp_path: Path) -> None:
    """Invalid UTF-8 should round-trip through surrogate escapes."""

    path = tmp_path / "latin1.go"
    path.write_bytes(b'var s = "\xe9"\n')

    text = read_source_file(path)

    assert text == 'var s = "\udce9"\n'
    assert text.encode("utf-8", "surrogateescape") == b'var s = "\xe9"\n'


def test_read_source_file_raises_input_error_for_missing_file(tmp_path: Path) -> None:
    """A missing path should raise an input-stage error with a hint."""

    with pytest.raises(InputReadError) as exc_info:
        read_source_file(tmp_path / "missing.go")

    assert exc_info.value.stage == "input"
    assert "missing.go" in exc_info.value.detail
    assert exc_info.value.hint is not None


def test_read_source_file_uses_injected_opener() -> None:
    """A substitute opener should be used instead of the filesystem."""

    class _MemoryOpener:
        def __init__(self) -> None:
            self.opened: list[Path] = []

        def open(self, path: Path) -> io.StringIO:
            self.opened.append(path)
            return io.StringIO("line one\nline two")

    opener = _MemoryOpener()

    assert read_source_file(Path("virtual.go"), opener=opener) == "line one\nline two\n"
    assert opener.opened == [Path("virtual.go")]


def test_read_source_file_maps_opener_os_errors() -> None:
    """OS errors raised by an opener should become input-stage errors."""

    class _DeniedOpener:
        def open(self, path: Path) -> io.StringIO:
            raise PermissionError(13, "Permission denied", str(path))

    with pytest.raises(InputReadError, match="Permission denied"):
        read_source_file(Path("secret.go"), opener=_DeniedOpener())
