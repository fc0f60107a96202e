"""Shared test fixtures for the nolintlint test suite."""

import os

import pytest

from nolintlint.directives import CommentGroup, Linter, LinterConfig, Needs, Position
from nolintlint.shared.infrastructure.config import get_settings
from nolintlint.source import extract_comment_groups


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep NOLINTLINT_* variables from the environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("NOLINTLINT_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_linter():
    """Build a linter for the nolint directive with the given needs."""

    def _make(needs=Needs.NONE, directives=("nolint",), excludes=()):
        return Linter(
            LinterConfig(
                directives=tuple(directives),
                excludes=frozenset(excludes),
                needs=needs,
            )
        )

    return _make


@pytest.fixture
def group():
    """Build a single-comment group at testing.go:1:1."""

    def _group(*lines, line=1, column=1):
        return CommentGroup(
            lines=tuple(lines),
            position=Position(filename="testing.go", offset=0, line=line, column=column),
        )

    return _group


@pytest.fixture
def lint_source():
    """Lint Go source text and return the issue strings."""

    def _lint(linter, source):
        groups = extract_comment_groups(source, filename="testing.go")
        return [str(issue) for issue in linter.run(groups)]

    return _lint
