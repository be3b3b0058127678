# src/qbank/config.py
"""Configuration loading utilities for the question bank.

This module provides configuration loading that can be used by:
- CLI commands
- External applications using qbank as a library

It handles:
- Finding and loading qbank.yaml config files
- Reading QBANK_* environment variable overrides
- Building Settings objects from multiple sources
- Creating a QuestionRepository from configuration
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from qbank.exceptions import InvalidKeyError

if TYPE_CHECKING:
    from qbank.configuration import StorageConfig
    from qbank.repository import QuestionRepository
    from qbank.settings import Settings

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_DATA_DIR = "./qbank_data"
DEFAULT_TENANT_ID = "default"
CONFIG_FILES = ["qbank.yaml", "qbank.yml", ".qbankrc"]

VALID_ROOT_KEYS = {
    "data_dir",
    "tenant_id",
    "settings",
}

VALID_SETTINGS_KEYS = {
    "default_limit",
    "max_limit",
    "default_sort_by",
    "default_sort_order",
    "default_random_count",
    "storage_backend",
}

# Env var -> settings field
_INT_ENV = {
    "QBANK_DEFAULT_LIMIT": "default_limit",
    "QBANK_MAX_LIMIT": "max_limit",
    "QBANK_DEFAULT_RANDOM_COUNT": "default_random_count",
}
_STR_ENV = {
    "QBANK_DEFAULT_SORT_BY": "default_sort_by",
    "QBANK_DEFAULT_SORT_ORDER": "default_sort_order",
    "QBANK_STORAGE_BACKEND": "storage_backend",
}


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

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        logger.warning("Ignoring %s: top level is not a mapping", config_path)
        return {}

    for warning in validate_config(config, config_path):
        logger.warning(warning)

    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read settings from QBANK_* environment variables.

    Returns only values that are explicitly set, so YAML settings are used
    unless overridden.
    """
    result: dict[str, Any] = {}

    for env_name, field in _INT_ENV.items():
        if (val := _safe_int(os.environ.get(env_name))) is not None:
            result[field] = val
    for env_name, field in _STR_ENV.items():
        if os.environ.get(env_name):
            result[field] = os.environ[env_name].strip().lower()

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract the 'settings:' section of a YAML config."""
    yaml_settings = config.get("settings", {}) or {}
    if not isinstance(yaml_settings, dict):
        return {}
    return {key: value for key, value in yaml_settings.items() if key in VALID_SETTINGS_KEYS}


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
    """
    from qbank.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    return Settings(**{**yaml_settings, **env_settings})


@dataclass
class QBankConfig:
    """Resolved configuration for creating a repository."""

    data_dir: str
    tenant_id: str
    settings: Settings
    config_path: str | None = None


def get_qbank_config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tenant_id: str | None = None,
) -> QBankConfig | ConfigError:
    """Resolve data directory, tenant and settings.

    Explicit arguments win over QBANK_DATA_DIR / QBANK_TENANT_ID, which win
    over the config file, which wins over defaults.

    Returns:
        QBankConfig, or ConfigError if the settings or tenant ID are invalid
    """
    from pydantic import ValidationError

    from qbank.repository import validate_scope_part

    resolved_path = Path(config_path) if config_path is not None else find_config_file()
    config = load_config(resolved_path) if resolved_path is not None else {}

    try:
        settings = build_settings(config)
    except ValidationError as e:
        return ConfigError(
            message=f"Invalid settings: {e.errors()[0]['msg']}",
            suggestion="Check the settings section of qbank.yaml and QBANK_* variables",
        )

    resolved_tenant = str(
        tenant_id
        or os.environ.get("QBANK_TENANT_ID")
        or config.get("tenant_id")
        or DEFAULT_TENANT_ID
    )
    try:
        validate_scope_part(resolved_tenant, "tenant_id")
    except InvalidKeyError as e:
        return ConfigError(
            message=str(e),
            suggestion="Tenant IDs may not contain path separators or '+'",
        )

    return QBankConfig(
        data_dir=str(
            data_dir
            or os.environ.get("QBANK_DATA_DIR")
            or config.get("data_dir")
            or DEFAULT_DATA_DIR
        ),
        tenant_id=resolved_tenant,
        settings=settings,
        config_path=str(resolved_path) if resolved_path is not None else None,
    )


def build_storage(config: QBankConfig) -> StorageConfig:
    """Pick the storage bundle named by settings.storage_backend."""
    from qbank.configuration import LocalStorage, SQLiteStorage

    if config.settings.storage_backend == "sqlite":
        return SQLiteStorage(config.data_dir)
    return LocalStorage(config.data_dir)


def create_repository(config: QBankConfig) -> QuestionRepository:
    """Create a QuestionRepository from resolved configuration."""
    from qbank.repository import QuestionRepository

    store = build_storage(config).build_store()
    return QuestionRepository(store, tenant_id=config.tenant_id, settings=config.settings)


def get_repository(
    tenant_id: str | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> QuestionRepository | ConfigError:
    """Create a repository based on configuration.

    Convenience wrapper around get_qbank_config and create_repository.
    """
    config = get_qbank_config(data_dir, config_path, tenant_id)
    if isinstance(config, ConfigError):
        return config
    return create_repository(config)
