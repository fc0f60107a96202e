"""Unit tests for .nolintlint.yaml loading and saving."""

import pytest
import yaml

from nolintlint.directives import DEFAULT_CONFIG, LinterConfig, Needs, load_linter_config, save_linter_config
from nolintlint.shared.domain.exceptions import ConfigurationError


@pytest.fixture
def config_file(tmp_path):
    """Write YAML content to a config file and return its path."""

    def _write(content):
        path = tmp_path / ".nolintlint.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


class TestLoadLinterConfig:
    """Test load_linter_config()."""

    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_linter_config(project_root=tmp_path) == DEFAULT_CONFIG

    def test_missing_file_returns_given_defaults(self, tmp_path):
        defaults = LinterConfig(directives=("lint:ignore",), needs=Needs.MACHINE)
        assert load_linter_config(project_root=tmp_path, defaults=defaults) == defaults

    def test_empty_file_returns_defaults(self, config_file):
        assert load_linter_config(config_path=config_file("   \n")) == DEFAULT_CONFIG

    def test_loads_camel_case_keys(self, config_file):
        path = config_file(
            "directives: [nolint, 'lint:ignore']\n"
            "excludes: [lll]\n"
            "requireMachine: true\n"
            "requireSpecific: false\n"
        )
        config = load_linter_config(config_path=path)
        assert config.directives == ("nolint", "lint:ignore")
        assert config.excludes == frozenset({"lll"})
        # requireExplanation not given: keeps the default bit
        assert config.needs == Needs.MACHINE | Needs.EXPLANATION

    def test_accepts_comma_separated_strings(self, config_file):
        config = load_linter_config(config_path=config_file("excludes: 'lll, gosec'\n"))
        assert config.excludes == frozenset({"lll", "gosec"})

    def test_invalid_yaml(self, config_file):
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_linter_config(config_path=config_file("directives: [nolint\n"))

    def test_top_level_must_be_mapping(self, config_file):
        with pytest.raises(ConfigurationError, match="mapping"):
            load_linter_config(config_path=config_file("- nolint\n"))

    def test_wrong_list_type(self, config_file):
        with pytest.raises(ConfigurationError, match="directives"):
            load_linter_config(config_path=config_file("directives: [1, 2]\n"))

    def test_wrong_flag_type(self, config_file):
        with pytest.raises(ConfigurationError, match="requireMachine"):
            load_linter_config(config_path=config_file("requireMachine: sometimes\n"))

    def test_empty_directive_list_rejected(self, config_file):
        with pytest.raises(ConfigurationError):
            load_linter_config(config_path=config_file("directives: []\n"))

    def test_requires_a_location(self):
        with pytest.raises(ConfigurationError):
            load_linter_config()


class TestSaveLinterConfig:
    """Test save_linter_config()."""

    def test_writes_camel_case_yaml(self, tmp_path):
        config = LinterConfig(directives=("nolint",), excludes=frozenset({"lll"}), needs=Needs.ALL)
        path = save_linter_config(config, project_root=tmp_path)

        assert path == tmp_path / ".nolintlint.yaml"
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data == {
            "directives": ["nolint"],
            "excludes": ["lll"],
            "requireMachine": True,
            "requireSpecific": True,
            "requireExplanation": True,
        }

    def test_saved_config_loads_back(self, tmp_path):
        config = LinterConfig(directives=("nolint", "lint:ignore"), needs=Needs.SPECIFIC)
        path = save_linter_config(config, config_path=tmp_path / "nested" / "cfg.yaml")
        assert load_linter_config(config_path=path) == config
