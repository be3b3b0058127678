# src/qbank/commands/info.py
"""Info command - storage diagnostics for a tenant."""

from __future__ import annotations

from pathlib import Path

from qbank.commands.base import InfoResult
from qbank.config import ConfigError, create_repository, get_qbank_config


def info(
    tenant_id: str | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> InfoResult:
    """Get record counts and approximate storage size.

    Returns:
        InfoResult with counts and size in bytes
    """
    config = get_qbank_config(data_dir, config_path, tenant_id)
    if isinstance(config, ConfigError):
        return InfoResult(success=False, error=config.message)

    data_info = create_repository(config).get_data_info()
    return InfoResult(
        success=True,
        tenant_id=config.tenant_id,
        data_dir=config.data_dir,
        questions_count=data_info.questions_count,
        papers_count=data_info.papers_count,
        storage_size=data_info.storage_size,
    )
