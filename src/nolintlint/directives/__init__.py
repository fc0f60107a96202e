"""
Directive linting for suppression comments.

This module validates directives such as `//nolint:lll // long URL`:
- machine-readable style (no space after //)
- specific check names
- explanations, except for excluded checks

Exports:
    - Linter: Validates directives in comment groups
    - LinterConfig: Immutable linter configuration
    - Needs: Bitmask of optional checks
    - Issue, IssueKind: Reported problems
    - CommentGroup, Position: Engine input
    - load_linter_config: Load configuration from file
    - save_linter_config: Save configuration to file
"""

from nolintlint.directives.config import LinterConfig
from nolintlint.directives.config_loader import (
    DEFAULT_CONFIG,
    load_linter_config,
    save_linter_config,
)
from nolintlint.directives.linter import Linter
from nolintlint.directives.models import (
    CommentGroup,
    Issue,
    IssueKind,
    Needs,
    Position,
)

__all__ = [
    "Linter",
    "LinterConfig",
    "Needs",
    "Issue",
    "IssueKind",
    "CommentGroup",
    "Position",
    "DEFAULT_CONFIG",
    "load_linter_config",
    "save_linter_config",
]
