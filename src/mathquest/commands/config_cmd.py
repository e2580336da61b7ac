# src/mathquest/commands/config_cmd.py
"""Config command - display current configuration."""

from __future__ import annotations

from pathlib import Path

import yaml

from mathquest.commands.base import ConfigResult, SettingInfo
from mathquest.config import (
    build_settings,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
    validate_config,
)


def _get_setting_source(
    key: str,
    yaml_settings: dict,
    env_settings: dict,
) -> str:
    """Determine the source of a setting value."""
    if key in env_settings:
        return "env var"
    if key in yaml_settings:
        return "yaml"
    return "default"


def config(
    config_path: str | Path | None = None,
) -> ConfigResult:
    """Get current configuration settings.

    Args:
        config_path: Override config file path

    Returns:
        ConfigResult with all settings and their sources
    """
    from pydantic import ValidationError

    found_config_path = Path(config_path) if config_path else find_config_file()
    try:
        file_config = load_config(found_config_path)
    except (OSError, yaml.YAMLError) as e:
        return ConfigResult(success=False, error=f"Could not read config file: {e}")
    if not isinstance(file_config, dict):
        return ConfigResult(success=False, error="Config file must contain a mapping")

    env_settings = get_settings_from_env()
    yaml_settings = get_settings_from_yaml(file_config)

    try:
        settings = build_settings(file_config, env_settings)
    except ValidationError as e:
        return ConfigResult(success=False, error=f"Invalid settings: {e.errors()[0]['msg']}")

    result = ConfigResult(success=True)
    result.config_path = str(found_config_path) if found_config_path else None
    result.warnings = validate_config(file_config, found_config_path)

    archetypes = (
        ", ".join(kind.value for kind in settings.enabled_archetypes)
        if settings.enabled_archetypes
        else "all"
    )
    setting_keys = [
        ("wrong_answer_count", str(settings.wrong_answer_count)),
        ("max_attempts", str(settings.max_attempts)),
        ("strict_wrong_answers", str(settings.strict_wrong_answers)),
        ("seed", str(settings.seed) if settings.seed is not None else "random"),
        ("enabled_archetypes", archetypes),
    ]

    for key, value in setting_keys:
        result.settings.append(
            SettingInfo(
                name=key,
                value=value,
                source=_get_setting_source(key, yaml_settings, env_settings),
            )
        )

    return result
