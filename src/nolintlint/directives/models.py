"""
Directive linting models.

These models define the engine's inputs and outputs:
- Needs: Bitmask of optional rule checks
- Position: Source location of a comment group
- CommentGroup: Consecutive comments treated as one logical comment
- IssueKind: The closed set of problems the linter reports
- Issue: A single reported problem (value object)
"""

from dataclasses import dataclass, field
from enum import Enum, IntFlag

from nolintlint.shared.domain.base_model import JsonModel


class Needs(IntFlag):
    """Optional checks a linter performs on top of the leading-space and structure checks."""

    NONE = 0
    MACHINE = 1  # No whitespace between // and the directive
    SPECIFIC = 2  # At least one check name after the colon
    EXPLANATION = 4  # Trailing // explanation
    ALL = MACHINE | SPECIFIC | EXPLANATION


@dataclass(frozen=True)
class Position(JsonModel):
    """
    Source location.

    Lines and columns are 1-based, the offset is 0-based.
    A line of 0 marks an unknown position.
    """

    filename: str = ""
    offset: int = 0
    line: int = 0
    column: int = 0

    @property
    def is_valid(self) -> bool:
        return self.line > 0

    def __str__(self) -> str:
        s = self.filename
        if self.is_valid:
            if s:
                s += ":"
            s += str(self.line)
            if self.column:
                s += f":{self.column}"
        return s or "-"


def normalize_comment_text(lines: tuple[str, ...] | list[str]) -> str:
    """
    Return the text of a comment group with comment markers removed.

    Line comments lose "//" and one following space, block comments lose
    "/*" and "*/". Trailing blanks are stripped from every line, leading and
    trailing blank lines are dropped and runs of blank lines collapse to one.
    A non-empty result always ends in a newline.

    Args:
        lines: Raw comment texts, markers intact

    Returns:
        Normalized comment text
    """
    collected: list[str] = []
    for comment in lines:
        if comment.startswith("//"):
            comment = comment[2:]
            if comment.startswith(" "):
                comment = comment[1:]
        elif comment.startswith("/*"):
            comment = comment[2:]
            if comment.endswith("*/"):
                comment = comment[:-2]
        collected.extend(line.rstrip(" \t\r") for line in comment.split("\n"))

    kept: list[str] = []
    for line in collected:
        if line or (kept and kept[-1]):
            kept.append(line)

    while kept and not kept[-1]:
        kept.pop()
    if not kept:
        return ""
    return "\n".join(kept) + "\n"


@dataclass(frozen=True)
class CommentGroup:
    """
    A run of adjacent comments with no code between them.

    Attributes:
        lines: Raw comment texts in source order, markers intact. A block
            comment is one entry and may contain newlines.
        position: Position of the first character of the first comment
    """

    lines: tuple[str, ...]
    position: Position = field(default_factory=Position)

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so groups stay hashable.
        object.__setattr__(self, "lines", tuple(self.lines))

    @property
    def text(self) -> str:
        """Comment text with markers stripped and lines joined."""
        return normalize_comment_text(self.lines)


class IssueKind(Enum):
    """Problems reported for a directive."""

    EXTRA_LEADING_SPACE = "extra_leading_space"
    NOT_MACHINE_STYLE = "not_machine_style"
    NOT_SPECIFIC = "not_specific"
    MALFORMED_DIRECTIVE = "malformed_directive"
    MISSING_EXPLANATION = "missing_explanation"


def _expected_machine_style(full_directive: str) -> str:
    return full_directive[:2] + full_directive[2:].lstrip()


_MESSAGES = {
    IssueKind.EXTRA_LEADING_SPACE: lambda i: (
        f"directive `{i.full_directive}` should not have more than one leading space"
    ),
    IssueKind.NOT_MACHINE_STYLE: lambda i: (
        f"directive `{i.full_directive}` should be written without leading space as "
        f"`{_expected_machine_style(i.full_directive)}`"
    ),
    IssueKind.NOT_SPECIFIC: lambda i: (
        f"directive `{i.full_directive}` should mention specific linter such as "
        f"`//{i.directive_with_optional_leading_space}:my-linter`"
    ),
    IssueKind.MALFORMED_DIRECTIVE: lambda i: (
        f"directive `{i.full_directive}` should match "
        f"`//{i.directive_with_optional_leading_space}[:<comma-separated-linters>] [// <explanation>]`"
    ),
    IssueKind.MISSING_EXPLANATION: lambda i: (
        f"directive `{i.full_directive}` should provide explanation such as "
        f"`{i.full_directive_without_explanation} // this is why`"
    ),
}


@dataclass(frozen=True)
class Issue(JsonModel):
    """
    A problem found in one directive use.

    Attributes:
        kind: Which rule produced the issue
        full_directive: First raw line of the comment group, as written
        directive_with_optional_leading_space: Directive keyword, prefixed
            with a single space when the source had any leading whitespace
        position: Position of the comment group
        full_directive_without_explanation: Fix suggestion, set only for
            MISSING_EXPLANATION
    """

    kind: IssueKind
    full_directive: str
    directive_with_optional_leading_space: str
    position: Position
    full_directive_without_explanation: str | None = None

    def __post_init__(self) -> None:
        if self.kind is IssueKind.MISSING_EXPLANATION and self.full_directive_without_explanation is None:
            raise ValueError("MISSING_EXPLANATION issues need full_directive_without_explanation")

    def explanation(self) -> str:
        """Human-readable description of what was found and what is expected."""
        return _MESSAGES[self.kind](self)

    def __str__(self) -> str:
        return f"{self.explanation()} at {self.position}"

    def to_json(self) -> dict:
        data = super().to_json()
        data["message"] = self.explanation()
        if self.full_directive_without_explanation is None:
            del data["fullDirectiveWithoutExplanation"]
        return data
