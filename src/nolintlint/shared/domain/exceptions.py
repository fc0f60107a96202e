"""
Domain exceptions for nolintlint.

Configuration problems fail fast at construction time.
Malformed directives found in source are issues, never exceptions.
All application errors inherit from NolintlintError.
"""


class NolintlintError(Exception):
    """Base class for all nolintlint exceptions."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(NolintlintError):
    """Raised when configuration is invalid or corrupt."""

    pass


class InvalidDirectivePatternError(ConfigurationError):
    """Raised when a configured directive name cannot be compiled into a pattern."""

    def __init__(self, directive: str, message: str, context: dict = None):
        super().__init__(message, context={"directive": directive, **(context or {})})
        self.directive = directive


class SourceLoadError(NolintlintError):
    """Raised when a source file or path cannot be loaded."""

    pass


class SourceParseError(SourceLoadError):
    """Raised when comments cannot be extracted from source text."""

    pass
