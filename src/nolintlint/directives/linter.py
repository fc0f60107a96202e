"""
Directive linter.

Main class:
- Linter: Validates directive comments in comment groups

Checks, in order, for each comment group and configured directive:
1. Extra leading space (always)
2. Machine-readable style (Needs.MACHINE)
3. Directive grammar; a malformed directive stops the remaining checks
4. Specific check names (Needs.SPECIFIC)
5. Explanation (Needs.EXPLANATION), unless every named check is excluded
"""

from collections.abc import Iterable

from nolintlint.directives.config import LinterConfig
from nolintlint.directives.models import CommentGroup, Issue, IssueKind, Needs
from nolintlint.directives.patterns import (
    LEADING_SPACE_PATTERN,
    DirectivePatterns,
    compile_all,
    normalize_excludes,
    split_check_names,
    strip_blank_explanation,
)
from nolintlint.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Linter:
    """
    Enforces that directives fulfill the configured requirements.

    Construction compiles every directive pattern up front, so a Linter
    either exists fully configured or not at all.
    """

    def __init__(self, config: LinterConfig):
        """
        Initialize linter.

        Args:
            config: Linter configuration

        Raises:
            InvalidDirectivePatternError: If a directive name cannot be compiled
        """
        self.config = config
        self._patterns: list[DirectivePatterns] = compile_all(config.directives)
        self._excludes = normalize_excludes(config.excludes)

        logger.debug(
            "linter_created",
            directives=list(config.directives),
            excludes=sorted(self._excludes),
            needs=int(config.needs),
        )

    @property
    def needs(self) -> Needs:
        return self.config.needs

    def run(self, groups: Iterable[CommentGroup]) -> list[Issue]:
        """
        Lint comment groups.

        Args:
            groups: Comment groups in source order

        Returns:
            Issues ordered by group, then by configured directive
        """
        issues: list[Issue] = []
        for group in groups:
            for patterns in self._patterns:
                issues.extend(self._check(group, patterns))
        return issues

    def run_many(self, batches: Iterable[Iterable[CommentGroup]]) -> list[Issue]:
        """Lint several files' comment groups, keeping input order."""
        issues: list[Issue] = []
        for groups in batches:
            issues.extend(self.run(groups))
        return issues

    def _check(self, group: CommentGroup, patterns: DirectivePatterns) -> list[Issue]:
        match = patterns.prefix.match(group.text)
        if match is None:
            return []
        directive = match.group(1)

        first_line = group.lines[0]
        leading_space_match = LEADING_SPACE_PATTERN.match(first_line)
        if leading_space_match is None:
            # Block comments never carry a directive.
            return []
        leading_space = leading_space_match.group(1)

        directive_with_optional_leading_space = directive
        if leading_space:
            directive_with_optional_leading_space = " " + directive

        def issue(kind: IssueKind, **extra: str) -> Issue:
            return Issue(
                kind=kind,
                full_directive=first_line,
                directive_with_optional_leading_space=directive_with_optional_leading_space,
                position=group.position,
                **extra,
            )

        issues: list[Issue] = []

        if len(leading_space) > 1:
            issues.append(issue(IssueKind.EXTRA_LEADING_SPACE))

        if self.needs & Needs.MACHINE and leading_space:
            issues.append(issue(IssueKind.NOT_MACHINE_STYLE))

        full_match = patterns.full.match(first_line)
        if full_match is None:
            logger.debug(
                "directive_parse_failed",
                directive=patterns.directive,
                text=first_line,
                position=str(group.position),
            )
            # Structure unknown: the malformed report replaces everything else.
            return [issue(IssueKind.MALFORMED_DIRECTIVE)]

        check_list, explanation = full_match.group(1) or "", full_match.group(2) or ""
        checks = split_check_names(check_list)

        if self.needs & Needs.SPECIFIC and not checks:
            issues.append(issue(IssueKind.NOT_SPECIFIC))

        if self.needs & Needs.EXPLANATION and _is_blank_explanation(explanation):
            # A blanket directive always needs a reason; otherwise only
            # when some named check is not excluded.
            needs_explanation = not checks or any(c not in self._excludes for c in checks)
            if needs_explanation:
                issues.append(
                    issue(
                        IssueKind.MISSING_EXPLANATION,
                        full_directive_without_explanation=strip_blank_explanation(first_line),
                    )
                )

        return issues


def _is_blank_explanation(explanation: str) -> bool:
    return not explanation or explanation.strip() == "//"
