"""Unit tests for clipboard reading."""

from __future__ import annotations

import pyperclip
import pytest

from nogocomments.errors import InputReadError
from nogocomments.io.clipboard import read_clipboard


def test_read_clipboard_returns_clipboard_text(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clipboard contents should be returned unchanged."""

    monkeypatch.setattr(pyperclip, "paste", lambda: "func f() {}")

    assert read_clipboard() == "func f() {}"


def test_read_clipboard_maps_missing_mechanism_to_input_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A missing clipboard mechanism should raise an input-stage error."""

    def _unavailable() -> str:
        raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

    monkeypatch.setattr(pyperclip, "paste", _unavailable)

    with pytest.raises(InputReadError, match="failed to read from clipboard") as exc_info:
        read_clipboard()

    assert exc_info.value.stage == "input"
    assert exc_info.value.hint is not None
