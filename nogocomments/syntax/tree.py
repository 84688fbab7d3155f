"""Syntax tree records shared by the Go backend and printer.

Key types:
- `Token`: one printable leaf of the source, literals kept atomic.
- `GoSyntaxTree`: parsed source with its code tokens and comment annotations.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tree_sitter import Node, Tree


@dataclass(frozen=True, slots=True)
class Token:
    """A printable leaf of the parsed source.

    Attributes:
        kind: tree-sitter node type; for anonymous tokens this is the token text.
        text: Exact source text of the token.
        start_byte: Byte offset of the token in the parsed source.
        start_row: 0-based row where the token starts.
        end_row: 0-based row where the token ends (differs for raw strings
            and block comments).
        named: Whether the node is a named grammar node (identifiers, literals).
        node: Underlying tree-sitter node, used for parent context.
    """

    kind: str
    text: str
    start_byte: int
    start_row: int
    end_row: int
    named: bool
    node: Node = field(compare=False, repr=False)

    @property
    def is_comment(self) -> bool:
        """Return whether this token is a comment."""

        return self.kind == "comment"

    @property
    def is_keyword(self) -> bool:
        """Return whether this token is a Go keyword such as `func` or `map`."""

        return not self.named and self.kind.isalpha()

    @property
    def is_word(self) -> bool:
        """Return whether this token is an identifier, literal, or keyword."""

        return self.named or self.is_keyword


@dataclass(slots=True)
class GoSyntaxTree:
    """Parsed Go compilation unit owned by a single pipeline call.

    Attributes:
        source: UTF-8 bytes the tree was parsed from.
        root: tree-sitter `source_file` node.
        parsed: tree-sitter tree owning `root`; kept alive while tokens reference it.
        tokens: Non-comment tokens in source order.
        comments: Comment annotations in source order; cleared when stripping.
    """

    source: bytes
    root: Node
    parsed: Tree | None = field(default=None, repr=False)
    tokens: list[Token] = field(default_factory=list)
    comments: list[Token] = field(default_factory=list)
