"""
Configuration loader for directive checks.

Loads and saves linter configuration from .nolintlint.yaml.

Functions:
- load_linter_config: Load configuration from YAML file
- save_linter_config: Save configuration to YAML file
"""

from pathlib import Path
from typing import Any

import yaml

from nolintlint.directives.config import LinterConfig
from nolintlint.directives.models import Needs
from nolintlint.shared.domain.base_model import to_camel_case, to_snake_case
from nolintlint.shared.domain.exceptions import ConfigurationError
from nolintlint.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILE_NAME = ".nolintlint.yaml"

DEFAULT_CONFIG = LinterConfig(
    directives=("nolint",),
    excludes=frozenset(),
    needs=Needs.EXPLANATION | Needs.SPECIFIC,
)

# YAML flag name -> bit it toggles
_NEEDS_KEYS = {
    "require_machine": Needs.MACHINE,
    "require_specific": Needs.SPECIFIC,
    "require_explanation": Needs.EXPLANATION,
}


def _convert_keys_to_snake_case(data: Any) -> Any:
    """Recursively convert dictionary keys from camelCase to snake_case."""
    if isinstance(data, dict):
        return {
            to_snake_case(key): _convert_keys_to_snake_case(value)
            for key, value in data.items()
        }
    elif isinstance(data, list):
        return [_convert_keys_to_snake_case(item) for item in data]
    else:
        return data


def _resolve_path(config_path: Path | None, project_root: Path | None) -> Path:
    if config_path is not None:
        return config_path
    if project_root is None:
        raise ConfigurationError("Either config_path or project_root must be provided")
    return project_root / CONFIG_FILE_NAME


def _string_list(data: dict[str, Any], key: str, path: Path) -> list[str] | None:
    if key not in data:
        return None
    value = data[key]
    if isinstance(value, str):
        # Accept the CLI's comma-separated form too
        value = [part.strip() for part in value.split(",") if part.strip()]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(
            f"'{to_camel_case(key)}' must be a list of strings in {path}",
            context={"path": str(path), "key": key},
        )
    return value


def load_linter_config(
    config_path: Path | None = None,
    project_root: Path | None = None,
    defaults: LinterConfig | None = None,
) -> LinterConfig:
    """
    Load linter configuration from YAML file.

    Args:
        config_path: Path to .nolintlint.yaml file
        project_root: Project root directory (uses <root>/.nolintlint.yaml)
        defaults: Values for keys missing from the file (default: DEFAULT_CONFIG)

    Returns:
        LinterConfig loaded from file, or defaults if the file does not exist

    Raises:
        ConfigurationError: If YAML is invalid or values have the wrong type
    """
    config_path = _resolve_path(config_path, project_root)
    defaults = defaults or DEFAULT_CONFIG

    if not config_path.exists():
        logger.debug("config_file_not_found", path=str(config_path))
        return defaults

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_path}: {e}", context={"path": str(config_path)}) from e

    if not content.strip():
        return defaults

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}", context={"path": str(config_path)}) from e

    if data is None:
        return defaults
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a mapping at the top of {config_path}",
            context={"path": str(config_path)},
        )

    data = _convert_keys_to_snake_case(data)

    directives = _string_list(data, "directives", config_path)
    excludes = _string_list(data, "excludes", config_path)

    needs = defaults.needs
    for key, bit in _NEEDS_KEYS.items():
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, bool):
            raise ConfigurationError(
                f"'{to_camel_case(key)}' must be true or false in {config_path}",
                context={"path": str(config_path), "key": key},
            )
        needs = needs | bit if value else needs & ~bit

    config = LinterConfig(
        directives=tuple(directives) if directives is not None else defaults.directives,
        excludes=frozenset(excludes) if excludes is not None else defaults.excludes,
        needs=Needs(needs),
    )
    logger.info("config_file_loaded", path=str(config_path), directives=list(config.directives))
    return config


def save_linter_config(
    config: LinterConfig,
    config_path: Path | None = None,
    project_root: Path | None = None,
) -> Path:
    """
    Save linter configuration to YAML file.

    Args:
        config: LinterConfig to save
        config_path: Path to .nolintlint.yaml file
        project_root: Project root directory (uses <root>/.nolintlint.yaml)

    Returns:
        Path the configuration was written to

    Raises:
        ConfigurationError: If neither config_path nor project_root is provided
    """
    config_path = _resolve_path(config_path, project_root)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "directives": list(config.directives),
        "excludes": sorted(config.excludes),
    }
    for key, bit in _NEEDS_KEYS.items():
        data[to_camel_case(key)] = bool(config.needs & bit)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    return config_path

