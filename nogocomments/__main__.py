"""Module entrypoint for running nogocomments as ``python -m nogocomments``."""

from __future__ import annotations

from nogocomments.cli import main


if __name__ == "__main__":
    main()
