# src/qbank/commands/stats.py
"""Stats command - show count-by-dimension statistics."""

from __future__ import annotations

from pathlib import Path

from qbank.commands.base import StatsResult
from qbank.config import ConfigError, get_repository


def stats(
    tenant_id: str | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> StatsResult:
    """Get the stored statistics for a tenant.

    Returns:
        StatsResult; stats is None when nothing has been saved yet
    """
    repo = get_repository(tenant_id, data_dir, config_path)
    if isinstance(repo, ConfigError):
        return StatsResult(success=False, error=repo.message)

    return StatsResult(success=True, stats=repo.get_question_stats())
