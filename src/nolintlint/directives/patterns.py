"""
Directive pattern compilation.

Each directive name yields two patterns:
- prefix: does the normalized comment text start with the directive at all?
- full: does the first raw comment line follow the directive grammar
  `//<directive>[:<checks>] [// <explanation>]`?
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from nolintlint.shared.domain.exceptions import InvalidDirectivePatternError

# Whitespace between "//" and the directive, read from the raw line
# because normalized text drops the first space.
LEADING_SPACE_PATTERN = re.compile(r"^//(\s*)", re.ASCII)

# Trailing whitespace plus an empty "//" explanation marker.
TRAILING_BLANK_EXPLANATION_PATTERN = re.compile(r"\s*(//\s*)?$", re.ASCII)


@dataclass(frozen=True)
class DirectivePatterns:
    """Compiled patterns for one directive name."""

    directive: str
    prefix: re.Pattern
    full: re.Pattern


def compile_directive_patterns(directive: str) -> DirectivePatterns:
    """
    Compile the prefix and full-line patterns for a directive name.

    Args:
        directive: Directive keyword, taken literally

    Returns:
        DirectivePatterns for the directive

    Raises:
        InvalidDirectivePatternError: If either pattern fails to compile
    """
    quoted = re.escape(directive)
    try:
        prefix = re.compile(rf"^\s*({quoted})(:\S+)?\b", re.ASCII)
    except re.error as e:
        raise InvalidDirectivePatternError(
            directive, f'unable to create directive pattern for "{directive}": {e}'
        ) from e
    try:
        full = re.compile(rf"^//\s*{quoted}(:\S+)?\s*(//.*)?\s*\n?$", re.ASCII)
    except re.error as e:
        raise InvalidDirectivePatternError(
            directive, f'unable to create full pattern for "{directive}": {e}'
        ) from e
    return DirectivePatterns(directive=directive, prefix=prefix, full=full)


def compile_all(directives: Iterable[str]) -> list[DirectivePatterns]:
    """Compile patterns for every directive, failing on the first bad one."""
    return [compile_directive_patterns(d) for d in directives]


def normalize_excludes(names: Iterable[str]) -> frozenset[str]:
    """Build the exclusion lookup set, dropping blank names."""
    return frozenset(name.strip() for name in names if name and name.strip())


def split_check_names(check_list: str) -> list[str]:
    """
    Split a matched check list into check names.

    Args:
        check_list: The ":a,b" group from the full pattern, or ""

    Returns:
        All non-empty comma-separated names, in order
    """
    if not check_list:
        return []
    return [name for name in check_list[1:].split(",") if name]


def strip_blank_explanation(line: str) -> str:
    """Remove trailing whitespace and an empty trailing "//" from a directive line."""
    return TRAILING_BLANK_EXPLANATION_PATTERN.sub("", line, count=1)
