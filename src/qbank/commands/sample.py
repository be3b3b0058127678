# src/qbank/commands/sample.py
"""Sample command - draw a random practice set."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from qbank.commands.base import SampleResult
from qbank.config import ConfigError, get_repository
from qbank.models import QuestionFilter


def sample(
    count: int | None = None,
    filters: QuestionFilter | dict | None = None,
    tenant_id: str | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> SampleResult:
    """Draw distinct random questions, optionally restricted by a filter.

    Args:
        count: Number of questions (defaults from settings)
        filters: Optional filter criteria
        tenant_id: Override tenant
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        SampleResult with up to count questions
    """
    repo = get_repository(tenant_id, data_dir, config_path)
    if isinstance(repo, ConfigError):
        return SampleResult(success=False, error=repo.message)

    requested = count if count is not None else repo.settings.default_random_count
    try:
        questions = repo.get_random_questions(requested, filters)
    except ValidationError as e:
        return SampleResult(success=False, error=f"Invalid filter: {e.errors()[0]['msg']}")

    return SampleResult(success=True, questions=questions, requested=requested)
