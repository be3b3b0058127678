# src/qbank/commands/search.py
"""Search command - filter, search, sort and page through questions.

This module provides the search logic that the CLI uses.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from qbank.commands.base import SearchResult
from qbank.config import ConfigError, get_repository
from qbank.models import QuestionFilter


def search(
    filters: QuestionFilter | dict | None = None,
    search_query: str | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
    limit: int | None = None,
    offset: int = 0,
    tenant_id: str | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> SearchResult:
    """Run a composite query against a tenant's questions.

    Args:
        filters: Filter criteria (QuestionFilter or mapping)
        search_query: Free-text query
        sort_by: Sort key (defaults from settings)
        sort_order: Sort direction (defaults from settings)
        limit: Page size (defaults from settings)
        offset: Matches to skip
        tenant_id: Override tenant
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        SearchResult with one page of questions and the total match count
    """
    repo = get_repository(tenant_id, data_dir, config_path)
    if isinstance(repo, ConfigError):
        return SearchResult(success=False, error=repo.message)

    try:
        response = repo.search(
            filters,
            search_query=search_query,
            sort_by=sort_by,
            sort_order=sort_order,
            limit=limit,
            offset=offset,
        )
    except ValidationError as e:
        return SearchResult(success=False, error=f"Invalid filter: {e.errors()[0]['msg']}")

    return SearchResult(
        success=True,
        questions=response.questions,
        total_count=response.total_count,
        search_query=response.search_query,
        sort_by=response.sort_by,
        sort_order=response.sort_order,
        limit=response.limit,
        offset=response.offset,
    )
