"""Shared pytest fixtures for the full nogocomments test suite."""

from __future__ import annotations

import pytest

from nogocomments.pipeline import CommentRemover
from nogocomments.syntax.go_backend import GoSyntaxBackend


@pytest.fixture
def go_backend() -> GoSyntaxBackend:
    """Provide a fresh tree-sitter backed Go syntax backend."""

    return GoSyntaxBackend()


@pytest.fixture
def remover() -> CommentRemover:
    """Provide a comment remover wired to the default Go backend."""

    return CommentRemover()
