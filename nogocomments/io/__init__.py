"""Input collaborators for the CLI.

This package reads source text from files and the system clipboard and maps
their failures onto `InputReadError`.
"""

from .clipboard import read_clipboard
from .file_reader import FileOpener, OsFileOpener, read_source_file

__all__ = ["FileOpener", "OsFileOpener", "read_source_file", "read_clipboard"]
