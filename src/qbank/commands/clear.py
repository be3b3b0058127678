# src/qbank/commands/clear.py
"""Clear command - remove all question data for a tenant.

Uses a callback for interactive confirmation, so each UI can implement
its own confirmation method.
"""

from __future__ import annotations

from pathlib import Path

from qbank.commands.base import ClearResult, ConfirmCallback, ConfirmRequest
from qbank.config import ConfigError, get_repository
from qbank.exceptions import StorageError


def clear(
    tenant_id: str | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    on_confirm: ConfirmCallback | None = None,
) -> ClearResult:
    """Remove a tenant's questions, papers and statistics.

    Args:
        tenant_id: Override tenant
        data_dir: Override data directory
        config_path: Override config file path
        on_confirm: Optional confirmation callback. Return True to proceed.
            If None, clearing proceeds without confirmation.

    Returns:
        ClearResult with the number of records removed, or a cancelled result
    """
    repo = get_repository(tenant_id, data_dir, config_path)
    if isinstance(repo, ConfigError):
        return ClearResult(success=False, error=repo.message)

    data_info = repo.get_data_info()

    if on_confirm is not None:
        confirm_request = ConfirmRequest(
            message=f"Clear all question data for tenant {repo.tenant_id}?",
            details=(
                f"This will remove {data_info.questions_count} questions and "
                f"{data_info.papers_count} question papers."
            ),
        )
        if not on_confirm(confirm_request):
            return ClearResult(success=False, tenant_id=repo.tenant_id, error="Cancelled.")

    try:
        repo.clear_all_data()
    except StorageError as e:
        return ClearResult(success=False, tenant_id=repo.tenant_id, error=f"Failed to clear: {e}")

    return ClearResult(
        success=True,
        tenant_id=repo.tenant_id,
        questions_removed=data_info.questions_count,
        papers_removed=data_info.papers_count,
    )
