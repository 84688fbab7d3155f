"""Pluggable syntax backend interface.

The comment-removal pipeline only needs three capabilities from a language
library: parse text into a tree, drop the tree's comment annotations, and
print the tree back to canonical source.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

TreeT = TypeVar("TreeT")


class SyntaxBackend(Protocol[TreeT]):
    """Protocol for parse/strip/render capability sets."""

    def parse(self, text: str) -> TreeT:
        """Parse a complete compilation unit, raising `ParseError` when invalid."""

    def strip_comments(self, tree: TreeT) -> None:
        """Remove all comment annotations from the tree in place."""

    def render(self, tree: TreeT) -> str:
        """Print the tree as canonical source, raising `FormatError` on faults."""
