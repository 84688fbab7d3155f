"""Intra-line spacing rules of the canonical Go printer.

Responsibilities:
- Decide which binary operators print with surrounding blanks, using gofmt's
  precedence and nesting-depth cutoff.
- Decide whether a blank separates two adjacent tokens on one line.
"""

from __future__ import annotations

from tree_sitter import Node

from .tree import Token

_PRECEDENCE = {
    "||": 1,
    "&&": 2,
    "==": 3,
    "!=": 3,
    "<": 3,
    "<=": 3,
    ">": 3,
    ">=": 3,
    "+": 4,
    "-": 4,
    "|": 4,
    "^": 4,
    "*": 5,
    "/": 5,
    "%": 5,
    "<<": 5,
    ">>": 5,
    "&": 5,
    "&^": 5,
}
_DEPTH_PRESERVING_TYPES = frozenset(
    {"selector_expression", "type_assertion_expression", "unary_expression"}
)
_TYPE_BRACKET_PARENTS = frozenset(
    {"slice_type", "array_type", "implicit_length_array_type", "map_type"}
)
_TYPE_START_BRACKET_PARENTS = frozenset(
    {"slice_type", "array_type", "implicit_length_array_type"}
)
_SPACED_FIELD_LISTS = frozenset({"field_declaration_list", "interface_type"})
_NO_SPACE_BEFORE = frozenset({",", ";", ")", "]", ":", ".", "++", "--"})


def _operator(node: Node) -> Node | None:
    return node.child_by_field_name("operator")


def _precedence(node: Node) -> int:
    operator = _operator(node)
    if operator is None:
        return 1
    return _PRECEDENCE.get(operator.type, 1)


def _is_dereference(node: Node) -> bool:
    operator = _operator(node)
    return operator is not None and operator.type == "*"


def _same_node(left: Node | None, right: Node | None) -> bool:
    if left is None or right is None:
        return False
    return (left.start_byte, left.end_byte, left.type) == (
        right.start_byte,
        right.end_byte,
        right.type,
    )


def _walk_binary(node: Node) -> tuple[bool, bool, int]:
    """Report precedence levels 4/5 in a binary chain and the worst token clash."""

    precedence = _precedence(node)
    has4 = precedence == 4
    has5 = precedence == 5
    max_problem = 0

    left = node.child_by_field_name("left")
    if left is not None and left.type == "binary_expression" and _precedence(left) >= precedence:
        left4, left5, left_problem = _walk_binary(left)
        has4 = has4 or left4
        has5 = has5 or left5
        max_problem = max(max_problem, left_problem)

    right = node.child_by_field_name("right")
    if right is not None and right.type == "binary_expression":
        if _precedence(right) > precedence:
            right4, right5, right_problem = _walk_binary(right)
            has4 = has4 or right4
            has5 = has5 or right5
            max_problem = max(max_problem, right_problem)
    elif right is not None and right.type == "unary_expression":
        operator, right_operator = _operator(node), _operator(right)
        if operator is not None and right_operator is not None:
            # `a / *p` and `a & &b` would lex as a comment or `&&` without a blank.
            pair = operator.type + right_operator.type
            if pair in ("/*", "&&", "&^"):
                max_problem = 5
            elif pair in ("++", "--"):
                max_problem = max(max_problem, 4)
    return has4, has5, max_problem


def _cutoff(node: Node, depth: int) -> int:
    has4, has5, max_problem = _walk_binary(node)
    if max_problem > 0:
        return max_problem + 1
    if has4 and has5:
        return 5 if depth == 1 else 4
    return 6 if depth == 1 else 4


def _diff_precedence(node: Node, precedence: int) -> int:
    if node.type != "binary_expression" or _precedence(node) != precedence:
        return 1
    return 0


def _expressions(node: Node | None) -> list[Node]:
    if node is None:
        return []
    if node.type != "expression_list":
        return [node]
    return [child for child in node.named_children if child.type != "comment"]


def _slice_colon_blanks(node: Node, depth: int) -> dict[int, tuple[bool, bool]]:
    """Map each `:` of a slice expression to blanks before and after it.

    Blanks appear only at nesting depth 1, when more than one index is
    present and at least one index is a binary expression.
    """

    children = node.children
    opening = next((i for i, child in enumerate(children) if child.type == "["), None)
    if opening is None:
        return {}
    inner = [child for child in children[opening + 1 : -1] if child.type != "comment"]
    indices = [child for child in inner if child.type != ":"]
    needs_blanks = (
        depth <= 1
        and len(indices) > 1
        and any(index.type == "binary_expression" for index in indices)
    )
    colons: dict[int, tuple[bool, bool]] = {}
    for position, child in enumerate(inner):
        if child.type != ":":
            continue
        before = position > 0 and inner[position - 1].type != ":"
        after = position + 1 < len(inner) and inner[position + 1].type != ":"
        colons[child.start_byte] = (needs_blanks and before, needs_blanks and after)
    return colons


def expression_blanks(root: Node) -> tuple[dict[int, bool], dict[int, tuple[bool, bool]]]:
    """Walk expressions with gofmt's nesting depth.

    Returns a map from each binary operator's start byte to whether it prints
    with blanks, and a map from each slice `:` to its (before, after) blanks.
    """

    blanks: dict[int, bool] = {}
    colons: dict[int, tuple[bool, bool]] = {}
    stack: list[tuple[Node, int]] = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        node_type = node.type
        if node_type == "binary_expression":
            operator = _operator(node)
            left = node.child_by_field_name("left")
            right = node.child_by_field_name("right")
            precedence = _precedence(node)
            if operator is not None:
                blanks[operator.start_byte] = precedence < _cutoff(node, depth)
            if left is not None:
                stack.append((left, depth + _diff_precedence(left, precedence)))
            if right is not None:
                stack.append((right, depth + 1))
        elif node_type == "parenthesized_expression":
            stack.extend((child, max(depth - 1, 1)) for child in node.named_children)
        elif node_type == "call_expression":
            arguments = node.child_by_field_name("arguments")
            values = (
                [child for child in arguments.named_children if child.type != "comment"]
                if arguments is not None
                else []
            )
            call_depth = depth + 1 if len(values) > 1 else depth
            function = node.child_by_field_name("function")
            if function is not None:
                stack.append((function, call_depth))
            stack.extend((value, call_depth) for value in values)
            type_arguments = node.child_by_field_name("type_arguments")
            if type_arguments is not None:
                stack.append((type_arguments, 1))
        elif node_type in ("assignment_statement", "short_var_declaration"):
            left = node.child_by_field_name("left")
            right = node.child_by_field_name("right")
            multiple = len(_expressions(left)) > 1 and len(_expressions(right)) > 1
            list_depth = 2 if multiple else 1
            for side in (left, right):
                stack.extend((expression, list_depth) for expression in _expressions(side))
        elif node_type in ("index_expression", "slice_expression"):
            if node_type == "slice_expression":
                colons.update(_slice_colon_blanks(node, depth))
            operand = node.child_by_field_name("operand")
            for child in node.named_children:
                if _same_node(child, operand):
                    stack.append((child, 1))
                else:
                    stack.append((child, depth + 1))
        elif node_type == "unary_expression" and _is_dereference(node):
            stack.extend((child, 1) for child in node.named_children)
        elif node_type in _DEPTH_PRESERVING_TYPES:
            stack.extend((child, depth) for child in node.named_children)
        else:
            stack.extend((child, 1) for child in node.named_children)
    return blanks, colons


class TokenSpacing:
    """Decide blanks between adjacent tokens of one output line."""

    def __init__(self, root: Node) -> None:
        """Precompute binary-operator spacing for the whole tree."""

        self._binary_blanks, self._slice_colons = expression_blanks(root)

    def is_binary_operator(self, token: Token) -> bool:
        """Return whether the token is the operator of a binary expression."""

        return token.start_byte in self._binary_blanks and not token.named

    def between(self, prev: Token, cur: Token) -> bool:
        """Return whether a single blank separates `prev` and `cur`."""

        if prev.is_comment or cur.is_comment:
            return True
        if self.is_binary_operator(cur):
            return self._binary_blanks[cur.start_byte]
        if self.is_binary_operator(prev):
            return self._binary_blanks[prev.start_byte]

        p, c = prev.kind, cur.kind
        if c == ":" and cur.start_byte in self._slice_colons:
            return self._slice_colons[cur.start_byte][0]
        if p == ":" and prev.start_byte in self._slice_colons:
            return self._slice_colons[prev.start_byte][1]
        if c == ";" and p in ("for", ";"):
            return True
        if self._is_import_dot(prev) or self._is_import_dot(cur):
            return True
        if c in _NO_SPACE_BEFORE:
            return False
        if p in ("(", "[", ".", "..."):
            return False
        if self._is_prefix_operator(prev):
            return False
        if p == "]" and self._parent_type(prev) in _TYPE_BRACKET_PARENTS:
            return False
        if c == "...":
            return self._parent_type(cur) == "variadic_parameter_declaration" and (
                prev.is_word or p == ","
            )
        if c == "{":
            return self._space_before_open_brace(prev, cur)
        if p == "{":
            return self._parent_type(prev) != "literal_value" and c != "}"
        if c == "}":
            return self._parent_type(cur) != "literal_value"
        if p == ":":
            return self._parent_type(prev) != "slice_expression"
        if self._parent_type(cur) == "channel_type" and (
            (p == "chan" and c == "<-") or (p == "<-" and c == "chan")
        ):
            return False
        if c == "(":
            return self._space_before_open_paren(prev, cur)
        if c == "[":
            return self._space_before_open_bracket(prev, cur)
        return True

    @staticmethod
    def _parent_type(token: Token) -> str:
        parent = token.node.parent
        return parent.type if parent is not None else ""

    @staticmethod
    def _is_import_dot(token: Token) -> bool:
        """Return whether the token is the dot-import name of an import spec."""

        if token.kind == "dot":
            return True
        parent = token.node.parent
        return token.kind == "." and parent is not None and parent.type in ("dot", "import_spec")

    @staticmethod
    def _is_prefix_operator(token: Token) -> bool:
        """Return whether the token binds tightly to the operand on its right."""

        parent = token.node.parent
        if parent is None or token.named:
            return False
        if parent.type == "unary_expression":
            operator = _operator(parent)
            return operator is not None and operator.start_byte == token.start_byte
        if parent.type in ("pointer_type", "field_declaration"):
            return token.kind == "*"
        return token.kind == "~"

    @staticmethod
    def _space_before_open_brace(prev: Token, token: Token) -> bool:
        parent = token.node.parent
        if parent is None:
            return True
        if parent.type == "literal_value":
            # Elided element types follow a separator; typed literals stay tight.
            return prev.kind in (",", ":")
        if parent.type in _SPACED_FIELD_LISTS:
            # One-line struct and interface bodies keep the brace tight.
            return parent.end_point.row != token.start_row
        return True

    @staticmethod
    def _space_before_open_paren(prev: Token, cur: Token) -> bool:
        parent = cur.node.parent
        if parent is not None and parent.type == "parameter_list":
            owner = parent.parent
            if owner is not None:
                for field_name in ("result", "receiver"):
                    if _same_node(owner.child_by_field_name(field_name), parent):
                        return True
            return False
        if prev.kind == "func":
            return False
        if prev.is_keyword:
            return True
        return not (prev.named or prev.kind in (")", "]", "}"))

    def _space_before_open_bracket(self, prev: Token, cur: Token) -> bool:
        if self._parent_type(cur) in _TYPE_START_BRACKET_PARENTS:
            return True
        return not (prev.is_word or prev.kind in (")", "]", "}"))
