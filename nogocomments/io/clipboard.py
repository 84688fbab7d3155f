"""Clipboard reading through `pyperclip`."""

from __future__ import annotations

import pyperclip

from ..errors import InputReadError


def read_clipboard() -> str:
    """Return the current clipboard text.

    Raises:
        InputReadError: If no clipboard mechanism is available or reading fails.
    """

    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        raise InputReadError(
            f"failed to read from clipboard: {exc}",
            hint="Install a clipboard provider (xclip, xsel or wl-clipboard) or use `--file`.",
        ) from exc
    return text if text is not None else ""
