# src/mathquest/config.py
"""Configuration loading utilities for MathQuest.

This module provides configuration loading that can be used by:
- CLI commands
- External applications embedding the question engine

It handles:
- Finding and loading mathquest.yaml config files
- Reading MATHQUEST_* environment variables
- Building Settings objects from multiple sources
- Creating QuestionFactory instances from configuration
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from mathquest.factory import QuestionFactory
    from mathquest.settings import Settings

logger = logging.getLogger(__name__)

CONFIG_FILES = ["mathquest.yaml", "mathquest.yml", ".mathquestrc"]


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in current directory or parent directories.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


VALID_ROOT_KEYS = {"settings"}

VALID_SETTINGS_KEYS = {
    "wrong_answer_count",
    "max_attempts",
    "strict_wrong_answers",
    "seed",
    "enabled_archetypes",
    "archetypes",  # alias
}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")
    elif settings is not None:
        warnings.append("The settings section must be a mapping")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    logger.debug("Loading config from %s", config_path)
    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-integer environment value %r", value)
        return None


def _parse_archetypes(value: str) -> list[str] | None:
    """Parse a comma separated archetype list, treating empty string as None."""
    names = [name.strip() for name in value.split(",") if name.strip()]
    return names or None


def get_settings_from_env() -> dict[str, Any]:
    """Read settings from MATHQUEST_* environment variables.

    Returns values that were explicitly set (not defaults), to allow proper
    precedence: YAML settings are used unless overridden by env vars.

    Returns:
        Dictionary of setting name -> value for explicitly set env vars
    """
    result: dict[str, Any] = {}

    if (val := _safe_int(os.environ.get("MATHQUEST_WRONG_ANSWER_COUNT"))) is not None:
        result["wrong_answer_count"] = val
    if (val := _safe_int(os.environ.get("MATHQUEST_MAX_ATTEMPTS"))) is not None:
        result["max_attempts"] = val
    if (val := _safe_int(os.environ.get("MATHQUEST_SEED"))) is not None:
        result["seed"] = val
    if "MATHQUEST_STRICT_WRONG_ANSWERS" in os.environ:
        result["strict_wrong_answers"] = os.environ["MATHQUEST_STRICT_WRONG_ANSWERS"].lower() in (
            "true",
            "1",
            "yes",
        )
    if "MATHQUEST_ARCHETYPES" in os.environ:
        result["enabled_archetypes"] = _parse_archetypes(os.environ["MATHQUEST_ARCHETYPES"])

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract settings from the ``settings:`` section of a YAML config.

    Args:
        config: The loaded YAML configuration

    Returns:
        Dictionary of setting name -> value
    """
    result: dict[str, Any] = {}

    yaml_settings = config.get("settings", {}) or {}
    if not isinstance(yaml_settings, dict):
        return result

    key_mappings = {
        "wrong_answer_count": "wrong_answer_count",
        "max_attempts": "max_attempts",
        "strict_wrong_answers": "strict_wrong_answers",
        "seed": "seed",
        "enabled_archetypes": "enabled_archetypes",
        "archetypes": "enabled_archetypes",  # alias
    }

    for yaml_key, settings_key in key_mappings.items():
        if yaml_key in yaml_settings:
            result[settings_key] = yaml_settings[yaml_key]

    return result


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)

    Returns:
        Configured Settings instance

    Raises:
        pydantic.ValidationError: If a merged value is invalid
    """
    from mathquest.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    # Merge: env vars override YAML, which overrides defaults
    merged = {**yaml_settings, **env_settings}
    return Settings(**merged)


def get_settings(config_path: str | Path | None = None) -> Settings | ConfigError:
    """Load config and build Settings, reporting problems as a ConfigError.

    Args:
        config_path: Override config file path

    Returns:
        Settings, or ConfigError if the config file or a value is invalid
    """
    from pydantic import ValidationError

    try:
        config = load_config(config_path)
    except (OSError, yaml.YAMLError) as e:
        return ConfigError(
            message=f"Could not read config file: {e}",
            suggestion="Check that the file exists and is valid YAML",
        )

    if not isinstance(config, dict):
        return ConfigError(
            message="Config file must contain a mapping",
            suggestion="Put options under a 'settings:' section",
        )

    for warning in validate_config(config, Path(config_path) if config_path else None):
        logger.warning(warning)

    try:
        return build_settings(config)
    except ValidationError as e:
        return ConfigError(
            message=f"Invalid settings: {e.errors()[0]['msg']}",
            suggestion="Run 'mathquest config' to see the effective values",
        )


def create_factory(settings: Settings) -> QuestionFactory:
    """Create a QuestionFactory from settings."""
    from mathquest.factory import QuestionFactory

    return QuestionFactory.from_settings(settings)
