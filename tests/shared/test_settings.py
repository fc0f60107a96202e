"""Unit tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from nolintlint.directives import LinterConfig, Needs
from nolintlint.shared.infrastructure.config import Settings, get_settings


@pytest.fixture(autouse=True)
def no_dotenv(tmp_path, monkeypatch):
    """Run from an empty directory so no .env file is picked up."""
    monkeypatch.chdir(tmp_path)


class TestSettings:
    """Test Settings defaults and environment overrides."""

    def test_defaults(self):
        settings = Settings()
        assert settings.directives == ["nolint"]
        assert settings.needs() == Needs.EXPLANATION | Needs.SPECIFIC
        assert settings.to_linter_config() == LinterConfig(
            directives=("nolint",),
            excludes=frozenset(),
            needs=Needs.EXPLANATION | Needs.SPECIFIC,
        )

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NOLINTLINT_DIRECTIVES", '["nolint", "lint:ignore"]')
        monkeypatch.setenv("NOLINTLINT_EXCLUDES", '["lll"]')
        monkeypatch.setenv("NOLINTLINT_REQUIRE_MACHINE", "true")
        monkeypatch.setenv("NOLINTLINT_REQUIRE_EXPLANATION", "false")

        config = Settings().to_linter_config()

        assert config.directives == ("nolint", "lint:ignore")
        assert config.excludes == frozenset({"lll"})
        assert config.needs == Needs.MACHINE | Needs.SPECIFIC

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("NOLINTLINT_LOG_LEVEL=debug\n", encoding="utf-8")
        assert Settings().log_level == "DEBUG"

    def test_invalid_log_format(self, monkeypatch):
        monkeypatch.setenv("NOLINTLINT_LOG_FORMAT", "xml")
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
