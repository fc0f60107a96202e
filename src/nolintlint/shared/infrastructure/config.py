"""
Application configuration using Pydantic Settings.

Loads defaults from NOLINTLINT_* environment variables and an optional .env file.
These are the outermost defaults; .nolintlint.yaml and CLI flags override them.
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nolintlint.directives.config import LinterConfig
from nolintlint.directives.models import Needs


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="NOLINTLINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Log output format (console/json)")

    # Directive checks
    directives: List[str] = Field(
        default=["nolint"],
        description="Directive keywords to check",
    )
    excludes: List[str] = Field(
        default=[],
        description="Check names that never require an explanation",
    )
    require_explanation: bool = Field(default=True, description="Require explanation for directives")
    require_specific: bool = Field(default=True, description="Require specific check names")
    require_machine: bool = Field(default=False, description="Require machine-readable directives")

    # Sources
    source_extensions: List[str] = Field(
        default=[".go"],
        description="File extensions scanned when a directory is given",
    )
    config_file: str = Field(
        default=".nolintlint.yaml",
        description="Project config file name",
    )

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("console", "json"):
            raise ValueError(f"log_format must be 'console' or 'json', got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    def needs(self) -> Needs:
        """Build the requirement bitmask from the require_* flags."""
        needs = Needs.NONE
        if self.require_explanation:
            needs |= Needs.EXPLANATION
        if self.require_specific:
            needs |= Needs.SPECIFIC
        if self.require_machine:
            needs |= Needs.MACHINE
        return needs

    def to_linter_config(self) -> LinterConfig:
        """Build the engine configuration from these settings."""
        return LinterConfig(
            directives=tuple(self.directives),
            excludes=frozenset(self.excludes),
            needs=self.needs(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
