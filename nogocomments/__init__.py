"""Top-level package for nogocomments.

This package strips comments from Go source code and Go snippets by parsing
the text and printing the tree back in canonical form. The main entry point
is `remove_comments`, backed by `CommentRemover`.
"""

from .pipeline import CommentRemover, remove_comments

__all__ = ["CommentRemover", "remove_comments", "__version__"]

__version__ = "1.0.0"
BUILD_DATE = "2026-10-19T00:00:00Z"
COPYRIGHT_YEAR = "2026"
