"""Configuration model and loaders for nogocomments.

Responsibilities:
- Hold the CLI's input selection and logging flags in an explicit dataclass.
- Resolve the debug flag from CLI values with an environment fallback.
- Read on/off environment flags with a fixed set of spellings.

Key types:
- `RemoverConfig`: normalized settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `RemoverConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Mapping

DEBUG_ENV_KEY = "NOGOCOMMENTS_DEBUG"
_FLAG_VALUES = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


@dataclass(frozen=True, slots=True)
class RemoverConfig:
    """Runtime configuration for one CLI invocation.

    Attributes:
        input_file: Path to read source text from, if any.
        paste: Whether to read source text from the clipboard.
        debug: Whether to log per-stage debug events.
    """

    input_file: Path | None = None
    paste: bool = False
    debug: bool = False

    @property
    def input_source(self) -> str | None:
        """Return `file`, `clipboard`, or `None`; a file path wins over `--paste`."""

        if self.input_file is not None:
            return "file"
        if self.paste:
            return "clipboard"
        return None

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.debug else "ERROR"


class ConfigLoader:
    """Factory helpers for building validated runtime config objects."""

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> RemoverConfig:
        """Build config from environment variables.

        Only `NOGOCOMMENTS_DEBUG` is read; blank values count as unset.

        Raises:
            ValueError: If the variable holds an unrecognized boolean token.
        """

        source = env if env is not None else os.environ
        debug = read_env_flag(source, DEBUG_ENV_KEY)
        return RemoverConfig(debug=bool(debug))

    @staticmethod
    def from_cli(
        input_file: Path | None,
        paste: bool,
        debug: bool,
        env: Mapping[str, str] | None = None,
    ) -> RemoverConfig:
        """Merge CLI values over environment defaults; `--debug` can only enable."""

        base = ConfigLoader.from_env(env)
        return replace(
            base,
            input_file=input_file,
            paste=paste,
            debug=debug or base.debug,
        )


def read_env_flag(env: Mapping[str, str], name: str) -> bool | None:
    """Return the on/off value of `name`, or `None` when it is unset or blank.

    Raises:
        ValueError: If the value is not one of the accepted spellings.
    """

    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return _FLAG_VALUES[raw.lower()]
    except KeyError:
        accepted = "/".join(_FLAG_VALUES)
        raise ValueError(f"`{name}` must be one of {accepted}, got `{raw}`.") from None
