"""Snippet normalization and restoration stages.

Responsibilities:
- Make bare Go snippets parseable by prepending a synthetic package clause.
- Remove that synthetic clause again from the printed output.

Key types:
- `NormalizedSnippet`: normalized text plus the injected-prefix flag.
- `SnippetNormalizer`: lexical check for a leading `package` keyword.
- `SnippetRestorer`: literal removal of the synthetic prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

SYNTHETIC_PREFIX = "package main\n"
UNIT_KEYWORD = "package"

_TRIVIA = re.compile(r"[ \t\r\n]+|//[^\n]*|/\*.*?(?:\*/|\Z)", re.DOTALL)
_WORD = re.compile(r"\w+")


@dataclass(frozen=True, slots=True)
class NormalizedSnippet:
    """Normalizer output threaded through one pipeline call.

    Attributes:
        text: Source text handed to the parser.
        injected: Whether the synthetic prefix was prepended.
    """

    text: str
    injected: bool


def first_significant_token(text: str) -> str | None:
    """Return the first token after whitespace and comments, or `None` at end of input.

    Words are returned whole; any other character is returned on its own.
    """

    position = 1 if text.startswith("\ufeff") else 0
    while position < len(text):
        trivia = _TRIVIA.match(text, position)
        if trivia is not None:
            position = trivia.end()
            continue
        word = _WORD.match(text, position)
        if word is not None:
            return word.group()
        return text[position]
    return None


class SnippetNormalizer:
    """Prefix snippets that lack a leading top-level unit declaration."""

    def __init__(self, keyword: str = UNIT_KEYWORD, prefix: str = SYNTHETIC_PREFIX) -> None:
        """Initialize the unit keyword to look for and the prefix to inject."""

        self.keyword = keyword
        self.prefix = prefix

    def normalize(self, text: str) -> NormalizedSnippet:
        """Return text ready for parsing and whether a prefix was injected."""

        token = first_significant_token(text)
        if token is None or token == self.keyword:
            return NormalizedSnippet(text=text, injected=False)
        return NormalizedSnippet(text=self.prefix + text, injected=True)


class SnippetRestorer:
    """Undo the normalizer's prefix injection on printed output."""

    def __init__(self, prefix: str = SYNTHETIC_PREFIX) -> None:
        """Initialize the exact prefix string to remove."""

        self.prefix = prefix

    def restore(self, text: str, injected: bool) -> str:
        """Remove the first literal occurrence of the prefix when it was injected."""

        if not injected:
            return text
        return text.replace(self.prefix, "", 1)
