# src/qbank/commands/config_cmd.py
"""Config command - display current configuration."""

from __future__ import annotations

from pathlib import Path

from qbank.commands.base import ConfigResult, SettingInfo
from qbank.config import (
    ConfigError,
    get_qbank_config,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
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
    resolved = get_qbank_config(config_path=config_path)
    if isinstance(resolved, ConfigError):
        return ConfigResult(success=False, error=resolved.message)

    file_config = load_config(resolved.config_path) if resolved.config_path else {}
    env_settings = get_settings_from_env()
    yaml_settings = get_settings_from_yaml(file_config)

    result = ConfigResult(
        success=True,
        data_dir=resolved.data_dir,
        tenant_id=resolved.tenant_id,
        config_path=resolved.config_path,
    )

    for key, value in resolved.settings.model_dump().items():
        result.settings.append(
            SettingInfo(
                name=key,
                value=str(value),
                source=_get_setting_source(key, yaml_settings, env_settings),
            )
        )

    return result
