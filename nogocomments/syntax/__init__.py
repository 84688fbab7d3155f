"""Syntax backends for the comment-removal pipeline.

This package defines the pluggable parse/strip/render interface and the
tree-sitter based Go implementation with its canonical printer.
"""

from .backend import SyntaxBackend
from .go_backend import GoSyntaxBackend
from .go_printer import GoPrinter
from .tree import GoSyntaxTree, Token

__all__ = ["SyntaxBackend", "GoSyntaxBackend", "GoPrinter", "GoSyntaxTree", "Token"]
