# src/qbank/settings.py
"""Query settings for the question bank.

Settings are passed programmatically - the library does not read from
environment variables. Applications that want env-based config read env vars
at the application layer (see qbank.config) and pass values explicitly.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from qbank.models import SortBy, SortOrder

StorageBackend = Literal["file", "sqlite"]


class Settings(BaseModel):
    """Behavioral settings for question queries.

    Example:
        settings = Settings(default_limit=20, default_sort_by="marks")
        repo = QuestionRepository(store, tenant_id="acme", settings=settings)
    """

    # Pagination
    default_limit: int = Field(default=50, ge=0)
    max_limit: int = Field(default=500, ge=0)  # larger page sizes are clamped

    # Ordering when the caller passes nothing (or something unknown)
    default_sort_by: SortBy = "year"
    default_sort_order: SortOrder = "desc"

    # Random practice sets
    default_random_count: int = Field(default=10, ge=0)

    # Which record store a storage bundle builds
    storage_backend: StorageBackend = "file"

    @model_validator(mode="after")
    def _check_limits(self) -> Settings:
        if self.default_limit > self.max_limit:
            raise ValueError(
                f"default_limit ({self.default_limit}) exceeds max_limit ({self.max_limit})"
            )
        return self

    def clamp_limit(self, limit: int | None) -> int:
        """Resolve a requested page size: None -> default, negative -> 0, capped at max."""
        if limit is None:
            return self.default_limit
        return min(max(0, limit), self.max_limit)
