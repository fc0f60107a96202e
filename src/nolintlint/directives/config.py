"""Immutable linter configuration."""

from dataclasses import dataclass, field

from nolintlint.directives.models import Needs
from nolintlint.shared.domain.exceptions import ConfigurationError


@dataclass(frozen=True)
class LinterConfig:
    """
    What a linter checks.

    Attributes:
        directives: Directive keywords to check, in order (e.g. "nolint")
        excludes: Check names that never require an explanation
        needs: Optional checks to perform
    """

    directives: tuple[str, ...]
    excludes: frozenset[str] = field(default_factory=frozenset)
    needs: Needs = Needs.NONE

    def __post_init__(self) -> None:
        if isinstance(self.directives, str):
            raise ConfigurationError(
                "directives must be a sequence of names, not a single string",
                context={"directives": self.directives},
            )
        directives = tuple(self.directives)
        if not directives:
            raise ConfigurationError("at least one directive must be configured")
        for name in directives:
            if not isinstance(name, str) or not name.strip():
                raise ConfigurationError(
                    f"invalid directive name {name!r}",
                    context={"directives": list(directives)},
                )
        if isinstance(self.excludes, str):
            raise ConfigurationError(
                "excludes must be a collection of names, not a single string",
                context={"excludes": self.excludes},
            )

        if int(self.needs) & ~int(Needs.ALL):
            raise ConfigurationError(
                f"unknown needs bits in {int(self.needs):#b}",
                context={"needs": int(self.needs)},
            )

        object.__setattr__(self, "directives", directives)
        object.__setattr__(self, "excludes", frozenset(self.excludes))
        object.__setattr__(self, "needs", Needs(self.needs))
