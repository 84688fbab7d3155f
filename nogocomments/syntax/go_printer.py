"""Canonical Go printer.

Responsibilities:
- Render a `GoSyntaxTree` back to source following gofmt layout rules.
- Keep the token rows of the source, collapsing blank runs to one line.
- Indent with tabs by bracket depth and pad aligned columns with tabs the way
  `go/printer` does under its default tabwriter settings.

Key types:
- `GoPrinter`: stateless printer; one `render` call per tree.
"""

from __future__ import annotations

from dataclasses import dataclass

from tree_sitter import Node

from .go_spacing import TokenSpacing
from .tree import GoSyntaxTree, Token

_OPENERS = frozenset({"(", "[", "{"})
_CLOSERS = frozenset({")", "]", "}"})
_CASE_CLAUSES = frozenset({"expression_case", "type_case", "communication_case", "default_case"})
_CONTINUATION_KINDS = frozenset(
    {"=", ":=", "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<=", ">>=", "&^=", "."}
)
_ALIGNED_NODE_TYPES = frozenset(
    {
        "field_declaration",
        "const_spec",
        "var_spec",
        "keyed_element",
        "function_declaration",
        "method_declaration",
    }
)
_FUNCTION_NODE_TYPES = frozenset({"function_declaration", "method_declaration"})
_GROUP_BRACKET_PARENTS = frozenset(
    {
        "field_declaration_list",
        "interface_type",
        "const_declaration",
        "var_declaration",
        "var_spec_list",
        "import_spec_list",
        "type_declaration",
    }
)
_TAB_WIDTH = 8
_DECLARATION_KINDS = {"method_declaration": "function_declaration"}


@dataclass(slots=True)
class _Line:
    """One output line: the tokens that start on one logical source row."""

    tokens: list[Token]
    blank_before: bool = False
    indent: int = 0
    cells: list[list[Token]] | None = None
    group: tuple[str, int] | None = None
    text: str = ""

    @property
    def code(self) -> list[Token]:
        return [token for token in self.tokens if not token.is_comment]


class GoPrinter:
    """Render Go syntax trees as canonically formatted source."""

    def render(self, tree: GoSyntaxTree) -> str:
        """Return formatted source for every token and remaining comment in the tree."""

        tokens = sorted([*tree.tokens, *tree.comments], key=lambda token: token.start_byte)
        if not tokens:
            return ""

        spacing = TokenSpacing(tree.root)
        lines = self._drop_redundant_separators(self._split_lines(tokens))
        self._separate_declaration_kinds(lines, tree.root)
        self._trim_group_edges(lines)
        self._assign_indents(lines, spacing)
        self._assign_cells(lines)
        self._render_text(lines, spacing)

        output: list[str] = []
        for index, line in enumerate(lines):
            if index and line.blank_before:
                output.append("")
            output.append("\t" * line.indent + line.text)
        return "\n".join(output) + "\n"

    @staticmethod
    def _split_lines(tokens: list[Token]) -> list[_Line]:
        """Group tokens by source row; multi-row tokens extend their line."""

        lines: list[_Line] = []
        prev_end_row: int | None = None
        for token in tokens:
            if prev_end_row is None or token.start_row > prev_end_row:
                blank_before = prev_end_row is not None and token.start_row - prev_end_row > 1
                lines.append(_Line(tokens=[token], blank_before=blank_before))
            else:
                lines[-1].tokens.append(token)
            prev_end_row = token.end_row
        return lines

    @staticmethod
    def _drop_redundant_separators(lines: list[_Line]) -> list[_Line]:
        """Remove line-final semicolons and trailing commas before a closer."""

        kept: list[_Line] = []
        carry_blank = False
        for line in lines:
            code = line.code
            dropped: set[int] = set()
            for index, token in enumerate(code):
                following = code[index + 1] if index + 1 < len(code) else None
                if token.kind == ";" and (following is None or following.kind in (")", "}")):
                    dropped.add(token.start_byte)
                elif token.kind == "," and following is not None and following.kind in _CLOSERS:
                    dropped.add(token.start_byte)
            line.tokens = [token for token in line.tokens if token.start_byte not in dropped]
            if not line.tokens:
                carry_blank = carry_blank or line.blank_before
                continue
            line.blank_before = line.blank_before or (carry_blank and bool(kept))
            carry_blank = False
            kept.append(line)
        return kept

    @staticmethod
    def _separate_declaration_kinds(lines: list[_Line], root: Node) -> None:
        """Force a blank line where the kind of top-level declaration changes."""

        breaks: set[int] = set()
        previous_kind: str | None = None
        for item in root.named_children:
            if item.type == "comment":
                continue
            kind = _DECLARATION_KINDS.get(item.type, item.type)
            if previous_kind is not None and kind != previous_kind:
                breaks.add(item.start_byte)
            previous_kind = kind

        for index, line in enumerate(lines):
            code = line.code
            if index == 0 or not code or code[0].start_byte not in breaks:
                continue
            # Doc comments stay attached; the blank goes above them.
            target = index
            while target > 0 and not lines[target].blank_before and not lines[target - 1].code:
                target -= 1
            lines[target].blank_before = True

    @classmethod
    def _trim_group_edges(cls, lines: list[_Line]) -> None:
        """Drop blank lines right inside the brackets of field lists and grouped declarations."""

        previous: _Line | None = None
        for line in lines:
            code = line.code
            if line.blank_before and code and previous is not None:
                previous_code = previous.code
                after_opener = bool(previous_code) and cls._is_group_bracket(
                    previous_code[-1], _OPENERS
                )
                if after_opener or cls._is_group_bracket(code[0], _CLOSERS):
                    line.blank_before = False
            previous = line

    @classmethod
    def _is_group_bracket(cls, token: Token, kinds: frozenset[str]) -> bool:
        parent = token.node.parent
        return (
            cls._is_bracket(token, kinds)
            and parent is not None
            and parent.type in _GROUP_BRACKET_PARENTS
        )

    def _assign_indents(self, lines: list[_Line], spacing: TokenSpacing) -> None:
        """Compute tab depth per line from the bracket structure."""

        stack: list[bool] = []
        follows_operator = False
        previous_opened = False
        chain_indent = 0
        for line in lines:
            code = line.code
            if not code:
                line.indent = sum(stack)
                continue

            position = 0
            while position < len(code) and self._is_bracket(code[position], _CLOSERS):
                if stack:
                    stack.pop()
                position += 1

            indent = sum(stack)
            if self._is_outdented(code[0]):
                indent -= 1
            elif follows_operator and not previous_opened:
                # Every line of an operator chain sits one level below its first line.
                indent = max(indent, chain_indent + 1)
            line.indent = max(indent, 0)
            if not follows_operator:
                chain_indent = line.indent

            opened: list[int] = []
            for token in code[position:]:
                if self._is_bracket(token, _OPENERS):
                    stack.append(False)
                    opened.append(len(stack) - 1)
                elif self._is_bracket(token, _CLOSERS):
                    if stack:
                        stack.pop()
                    if opened and opened[-1] == len(stack):
                        opened.pop()
            # Several brackets left open on one line add a single level.
            if opened:
                stack[opened[-1]] = True

            last = code[-1]
            follows_operator = spacing.is_binary_operator(last) or last.kind in _CONTINUATION_KINDS
            previous_opened = bool(opened)

    @staticmethod
    def _is_bracket(token: Token, kinds: frozenset[str]) -> bool:
        return not token.named and token.kind in kinds

    @staticmethod
    def _is_outdented(token: Token) -> bool:
        """Return whether the token starts a case clause or a label."""

        parent = token.node.parent
        if parent is None:
            return False
        if token.kind in ("case", "default"):
            return parent.type in _CASE_CLAUSES
        return token.kind == "label_name" and parent.type == "labeled_statement"

    def _assign_cells(self, lines: list[_Line]) -> None:
        """Split alignable entries into tabwriter-style cells on their first line."""

        for line in lines:
            code = line.code
            if not code:
                continue
            node = self._aligned_node(code[0])
            if node is None or node.parent is None:
                continue
            starts = self._column_starts(node)
            if all(start is None for start in starts):
                continue
            line.cells = self._split_cells(line.tokens, starts)
            kind = _DECLARATION_KINDS.get(node.type, node.type)
            line.group = (kind, node.parent.start_byte)

    def _aligned_node(self, token: Token) -> Node | None:
        """Return the alignable entry that starts with `token`."""

        node: Node | None = token.node
        while node is not None and node.start_byte == token.start_byte:
            if node.type in _ALIGNED_NODE_TYPES:
                return node if self._is_alignable(node) else None
            node = node.parent
        return None

    @staticmethod
    def _is_alignable(node: Node) -> bool:
        parent = node.parent
        if parent is None:
            return False
        single_row = node.start_point.row == node.end_point.row
        if node.type in _FUNCTION_NODE_TYPES:
            return single_row and node.child_by_field_name("body") is not None
        siblings = [child for child in parent.named_children if child.type != "comment"]
        if node.type == "keyed_element":
            multi_row = parent.start_point.row != parent.end_point.row
            return single_row and multi_row and len(siblings) > 1
        # Fields and specs align only when their group has more than one entry.
        return sum(1 for child in siblings if child.type == node.type) > 1

    @staticmethod
    def _column_starts(node: Node) -> list[int | None]:
        """Return the byte offsets where columns 1..n of an entry begin."""

        if node.type in _FUNCTION_NODE_TYPES:
            body = node.child_by_field_name("body")
            return [body.start_byte if body is not None else None]
        if node.type == "field_declaration":
            tag_node = node.child_by_field_name("tag")
            tag = tag_node.start_byte if tag_node is not None else None
            if node.child_by_field_name("name") is None:
                return [tag]
            type_node = node.child_by_field_name("type")
            if type_node is None:
                return [None]
            # A tag after a named field skips an empty column.
            return [type_node.start_byte] if tag is None else [type_node.start_byte, None, tag]
        if node.type == "keyed_element":
            children = node.children
            for index, child in enumerate(children[:-1]):
                if child.type == ":":
                    return [children[index + 1].start_byte]
            return [None]
        type_node = node.child_by_field_name("type")
        equals = next((child for child in node.children if child.type == "="), None)
        return [
            type_node.start_byte if type_node is not None else None,
            equals.start_byte if equals is not None else None,
        ]

    @staticmethod
    def _split_cells(tokens: list[Token], starts: list[int | None]) -> list[list[Token]]:
        count = 1 + max(index + 1 for index, start in enumerate(starts) if start is not None)
        cells: list[list[Token]] = [[] for _ in range(count)]
        for token in tokens:
            column = 0
            for index, start in enumerate(starts):
                if start is not None and token.start_byte >= start:
                    column = index + 1
            cells[column].append(token)
        return cells

    def _render_text(self, lines: list[_Line], spacing: TokenSpacing) -> None:
        """Join tokens into line text, padding aligned sections column by column."""

        index = 0
        while index < len(lines):
            line = lines[index]
            if line.cells is None:
                line.text = self._join(line.tokens, spacing)
                index += 1
                continue

            end = index + 1
            while (
                end < len(lines)
                and lines[end].cells is not None
                and lines[end].group == line.group
                and not lines[end].blank_before
            ):
                end += 1
            section = lines[index:end]
            rows = [[self._join(cell, spacing) for cell in entry.cells or []] for entry in section]
            self._pad_columns(rows)
            for entry, row in zip(section, rows):
                entry.text = "".join(row)
            index = end

    @staticmethod
    def _pad_columns(rows: list[list[str]]) -> None:
        """Pad terminated cells with tabs per contiguous column block.

        A cell is terminated when another cell follows it on the same row; the
        final cell of a row is never padded. A block's width is its widest cell
        plus one, at least one tab stop, rounded up to a tab stop. Columns that
        are empty across a block are dropped rather than padded.
        """

        column_count = max(len(row) for row in rows)
        for column in range(column_count - 1):
            row_index = 0
            while row_index < len(rows):
                if len(rows[row_index]) <= column + 1:
                    row_index += 1
                    continue
                block_end = row_index
                while block_end < len(rows) and len(rows[block_end]) > column + 1:
                    block_end += 1
                width = max(len(rows[r][column]) + 1 for r in range(row_index, block_end))
                if width > 1:
                    cell_width = _round_up(max(width, _TAB_WIDTH), _TAB_WIDTH)
                    for r in range(row_index, block_end):
                        padding = cell_width - len(rows[r][column])
                        rows[r][column] += "\t" * (_round_up(padding, _TAB_WIDTH) // _TAB_WIDTH)
                row_index = block_end

    @staticmethod
    def _join(tokens: list[Token], spacing: TokenSpacing) -> str:
        parts: list[str] = []
        prev: Token | None = None
        for token in tokens:
            if prev is not None and spacing.between(prev, token):
                parts.append(" ")
            parts.append(token.text)
            prev = token
        return "".join(parts)


def _round_up(value: int, step: int) -> int:
    return -(-value // step) * step
