"""Text stages that wrap the syntax backend.

This package holds the snippet normalizer and restorer that let bare Go
snippets pass through a parser expecting complete compilation units.
"""

from .snippet import (
    SYNTHETIC_PREFIX,
    NormalizedSnippet,
    SnippetNormalizer,
    SnippetRestorer,
    first_significant_token,
)

__all__ = [
    "SYNTHETIC_PREFIX",
    "NormalizedSnippet",
    "SnippetNormalizer",
    "SnippetRestorer",
    "first_significant_token",
]
