# contribkit/config/loader.py
"""
Layered configuration loading for contribkit.

Merge strategy:
    1. Package defaults (contribkit/config/defaults.yaml) - always loaded
    2. Project config ({root}/contribkit.yaml) - overrides defaults

The merged dict is validated against WorkflowConfig, so workflow code never
needs fallback logic - it just reads the values.

Usage:
    from contribkit.config.loader import load_workflow_config

    config = load_workflow_config()
    threshold = config.test.coverage_threshold
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from contribkit.config.schema import WorkflowConfig
from contribkit.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from contribkit.core.paths import ProjectPaths
from contribkit.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"


# =============================================================================
# Deep Merge
# =============================================================================


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence over `base`.
    Nested dicts are merged recursively.
    Lists are replaced entirely (not merged).

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# =============================================================================
# Loading Functions
# =============================================================================


def load_yaml(path: Union[str, Path]) -> dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"Loaded config from {p}")
    return data


def load_defaults() -> dict[str, Any]:
    """Load the packaged defaults."""
    return load_yaml(DEFAULTS_PATH)


def load_user_config(path: Optional[Path] = None) -> dict[str, Any] | None:
    """
    Load the project's contribkit.yaml.

    Returns None if the project has no config file (defaults apply).
    """
    user_path = path or ProjectPaths.config()

    if not user_path.exists():
        logger.debug(f"No project config at {user_path}")
        return None

    return load_yaml(user_path)


def load_workflow_config(path: Optional[Union[str, Path]] = None) -> WorkflowConfig:
    """
    Load defaults + project overrides and validate them.

    Args:
        path: Explicit config file. If given it must exist.

    Raises:
        ConfigNotFoundError: If an explicit path doesn't exist
        ConfigParseError: If YAML is invalid
        ConfigValidationError: If the merged config doesn't match the schema
    """
    if path is None:
        path = ProjectPaths.config_override()

    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigNotFoundError("Config file not found", path=config_path)
    else:
        config_path = ProjectPaths.config()

    merged = load_defaults()
    user = load_user_config(config_path)
    if user:
        merged = deep_merge(merged, user)

    try:
        return WorkflowConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Config validation failed: {e}",
            path=config_path if user is not None else DEFAULTS_PATH,
        ) from e
