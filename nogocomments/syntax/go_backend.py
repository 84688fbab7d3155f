"""Go syntax backend built on tree-sitter.

Responsibilities:
- Parse Go source into a `GoSyntaxTree` and reject invalid compilation units.
- Keep string, rune, and numeric literals as atomic tokens.
- Strip comment annotations and delegate printing to `GoPrinter`.
"""

from __future__ import annotations

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from ..errors import FormatError, ParseError, PipelineStageError
from .go_printer import GoPrinter
from .tree import GoSyntaxTree, Token

GO_LANGUAGE = Language(tree_sitter_go.language())

_ATOMIC_NODE_TYPES = frozenset(
    {
        "comment",
        "interpreted_string_literal",
        "raw_string_literal",
        "rune_literal",
        "int_literal",
        "float_literal",
        "imaginary_literal",
    }
)
_TOP_LEVEL_DECLARATIONS = frozenset(
    {
        "import_declaration",
        "const_declaration",
        "var_declaration",
        "type_declaration",
        "function_declaration",
        "method_declaration",
    }
)


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", "surrogateescape")


def _first_error_node(root: Node) -> Node:
    """Descend along error-carrying children to the first ERROR or MISSING node."""

    node = root
    while True:
        if node.type == "ERROR" or node.is_missing:
            return node
        next_node = next(
            (
                child
                for child in node.children
                if child.is_missing or child.type == "ERROR" or child.has_error
            ),
            None,
        )
        if next_node is None:
            return node
        node = next_node


def _first_leaf(node: Node) -> Node:
    """Return the first non-blank token inside `node`, or `node` itself."""

    while node.child_count:
        node = next(
            (child for child in node.children if child.end_byte > child.start_byte),
            node.children[0],
        )
        if node.type in _ATOMIC_NODE_TYPES:
            break
    return node


class GoSyntaxBackend:
    """Parse, strip, and print Go compilation units."""

    def __init__(self, printer: GoPrinter | None = None) -> None:
        """Initialize a dedicated tree-sitter parser and canonical printer."""

        self._parser = Parser(GO_LANGUAGE)
        self._printer = printer or GoPrinter()

    def parse(self, text: str) -> GoSyntaxTree:
        """Parse Go source into a syntax tree with comment annotations retained."""

        source = text.encode("utf-8", "surrogateescape")
        if not source.endswith(b"\n"):
            # The grammar requires a terminator after the last declaration.
            source += b"\n"
        parsed = self._parser.parse(source)
        root = parsed.root_node
        self._validate(root, source)
        tree = GoSyntaxTree(source=source, root=root, parsed=parsed)
        self._collect_tokens(tree)
        return tree

    def strip_comments(self, tree: GoSyntaxTree) -> None:
        """Clear every comment annotation from the tree in place."""

        tree.comments.clear()

    def render(self, tree: GoSyntaxTree) -> str:
        """Print the tree through the canonical Go printer."""

        try:
            return self._printer.render(tree)
        except PipelineStageError:
            raise
        except Exception as exc:
            raise FormatError(f"error formatting source code: {exc}") from exc

    def _validate(self, root: Node, source: bytes) -> None:
        """Reject trees that the Go compiler front end would not accept."""

        if root.has_error:
            node = _first_error_node(root)
            if node.is_missing:
                detail = f"syntax error: missing {node.type!r}"
            else:
                leaf = _first_leaf(node)
                found = _decode(source[leaf.start_byte : leaf.end_byte]).strip() or "EOF"
                detail = f"syntax error: unexpected {found!r}"
            raise ParseError(
                detail,
                line=node.start_point.row + 1,
                column=node.start_point.column + 1,
            )

        items = [child for child in root.named_children if child.type != "comment"]
        if not items or items[0].type != "package_clause":
            found = items[0] if items else None
            if found is None:
                end = root.end_point
                raise ParseError(
                    "expected 'package', found 'EOF'", line=end.row + 1, column=end.column + 1
                )
            raise ParseError(
                f"expected 'package', found {found.type!r}",
                line=found.start_point.row + 1,
                column=found.start_point.column + 1,
            )

        seen_other_declaration = False
        for item in items[1:]:
            if item.type not in _TOP_LEVEL_DECLARATIONS:
                raise ParseError(
                    "syntax error: non-declaration statement outside function body",
                    line=item.start_point.row + 1,
                    column=item.start_point.column + 1,
                )
            if item.type == "import_declaration":
                if seen_other_declaration:
                    raise ParseError(
                        "syntax error: imports must appear before other declarations",
                        line=item.start_point.row + 1,
                        column=item.start_point.column + 1,
                    )
            else:
                seen_other_declaration = True

    def _collect_tokens(self, tree: GoSyntaxTree) -> None:
        """Flatten the tree into ordered code tokens and comment annotations."""

        stack = [tree.root]
        while stack:
            node = stack.pop()
            if node.type not in _ATOMIC_NODE_TYPES and node.child_count > 0:
                stack.extend(reversed(node.children))
                continue
            text = _decode(tree.source[node.start_byte : node.end_byte])
            if not text.strip():
                # Newline and NUL statement terminators carry no printable text.
                continue
            token = Token(
                kind=node.type,
                text=text,
                start_byte=node.start_byte,
                start_row=node.start_point.row,
                end_row=node.end_point.row,
                named=node.is_named,
                node=node,
            )
            if token.is_comment:
                tree.comments.append(token)
            else:
                tree.tokens.append(token)
