# src/qbank/repository.py
"""Tenant-scoped question repository and composite query."""

from __future__ import annotations

import json
import logging
import random
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from qbank.aggregator import compute_stats
from qbank.exceptions import InvalidKeyError, StorageWriteError
from qbank.models import (
    DataInfo,
    Question,
    QuestionFilter,
    QuestionPaper,
    QuestionSearchResult,
    QuestionStats,
)
from qbank.query import apply_filters, apply_search_query, normalize_sort, paginate, sort_questions
from qbank.query.pagination import clamp
from qbank.settings import Settings
from qbank.stores import RecordStore
from qbank.stores.base import validate_name

logger = logging.getLogger(__name__)

QUESTIONS_KEY = "upsc_questions"
QUESTION_PAPERS_KEY = "upsc_question_papers"
QUESTION_STATS_KEY = "upsc_question_stats"
ALL_KEYS = (QUESTIONS_KEY, QUESTION_PAPERS_KEY, QUESTION_STATS_KEY)

DEFAULT_TENANT = "default"
DEFAULT_USER = "default"
# Joins tenant and user in a namespace; forbidden inside either part
SCOPE_SEPARATOR = "+"

_QUESTIONS = TypeAdapter(list[Question])
_PAPERS = TypeAdapter(list[QuestionPaper])

M = TypeVar("M", bound=BaseModel)
FilterInput = QuestionFilter | Mapping[str, Any] | None


def validate_scope_part(name: str, kind: str = "tenant_id") -> str:
    """Validate a tenant or user ID that becomes part of a storage namespace.

    Raises:
        InvalidKeyError: If the name is unsafe for the store or contains
            SCOPE_SEPARATOR.
    """
    validate_name(name, kind)
    if SCOPE_SEPARATOR in name:
        raise InvalidKeyError(f"Invalid {kind}: {name!r} (may not contain {SCOPE_SEPARATOR!r})")
    return name


def _dump(models: Sequence[BaseModel]) -> list[dict[str, Any]]:
    return [m.model_dump(mode="json", by_alias=True, exclude_none=True) for m in models]


def _coerce_filter(filters: FilterInput) -> QuestionFilter:
    if filters is None:
        return QuestionFilter()
    if isinstance(filters, QuestionFilter):
        return filters
    return QuestionFilter.model_validate(filters)


class QuestionRepository:
    """Stores one tenant's questions and papers and answers queries over them.

    Construct one instance per tenant and pass it to callers. Every read goes
    back to the record store, so external re-ingestion is always visible.
    Writes replace whole collections and are expected to be serialized by the
    caller.

    Example:
        from qbank import FileRecordStore, QuestionRepository

        repo = QuestionRepository(FileRecordStore("./data/questions"), tenant_id="acme")
        repo.save_questions(questions)
        page = repo.search({"subject": ["History"]}, sort_by="year", sort_order="desc")
    """

    def __init__(
        self,
        store: RecordStore,
        tenant_id: str = DEFAULT_TENANT,
        user_id: str = DEFAULT_USER,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Create a repository.

        Args:
            store: Record store holding the tenant's blobs.
            tenant_id: Tenant namespace.
            user_id: Optional user within the tenant. A non-default user gets
                its own namespace inside the tenant.
            settings: Query settings. Defaults to Settings().
            rng: Random source for get_random_questions (seed it for
                reproducible practice sets).
        """
        self.store = store
        self.tenant_id = tenant_id or DEFAULT_TENANT
        self.user_id = user_id or DEFAULT_USER
        self.settings = settings if settings is not None else Settings()
        self._rng = rng if rng is not None else random.Random()
        validate_scope_part(self.tenant_id, "tenant_id")
        validate_scope_part(self.user_id, "user_id")

    @property
    def namespace(self) -> str:
        """Storage namespace passed to the record store."""
        if self.user_id == DEFAULT_USER:
            return self.tenant_id
        return f"{self.tenant_id}{SCOPE_SEPARATOR}{self.user_id}"

    # ------------------------------------------------------------------
    # Loading

    def _load_list(self, key: str, adapter: TypeAdapter[list[M]]) -> list[M]:
        raw = self.store.get(self.namespace, key, [])
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning(
                "Expected a list under %s for %s, got %s", key, self.namespace, type(raw).__name__
            )
            return []
        try:
            return adapter.validate_python(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding malformed %s for %s (%d errors)", key, self.namespace, e.error_count()
            )
            return []

    def get_all_questions(self) -> list[Question]:
        """All stored questions in saved order, or [] if none."""
        return self._load_list(QUESTIONS_KEY, _QUESTIONS)

    def get_all_question_papers(self) -> list[QuestionPaper]:
        """All stored question papers in saved order, or [] if none."""
        return self._load_list(QUESTION_PAPERS_KEY, _PAPERS)

    def get_stats(self) -> QuestionStats | None:
        """Statistics for the last saved question collection, or None."""
        raw = self.store.get(self.namespace, QUESTION_STATS_KEY, None)
        if raw is None:
            return None
        try:
            return QuestionStats.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding malformed stats for %s (%d errors)", self.namespace, e.error_count()
            )
            return None

    get_question_stats = get_stats

    # ------------------------------------------------------------------
    # Writing

    def save_questions(self, questions: Sequence[Question | Mapping[str, Any]]) -> None:
        """Replace the stored questions and recompute statistics.

        Records are validated before anything is written, so an invalid
        record leaves storage untouched.

        Raises:
            pydantic.ValidationError: If a record is malformed.
            StorageWriteError: If the store cannot persist the collection.
        """
        validated = _QUESTIONS.validate_python(list(questions))
        stats = compute_stats(validated)

        self.store.set(self.namespace, QUESTIONS_KEY, _dump(validated))
        try:
            self.store.set(
                self.namespace,
                QUESTION_STATS_KEY,
                stats.model_dump(mode="json", by_alias=True),
            )
        except StorageWriteError:
            # Stale stats would describe the previous collection
            try:
                self.store.remove(self.namespace, QUESTION_STATS_KEY)
            except StorageWriteError as remove_error:
                logger.error("Could not drop stale stats for %s: %s", self.namespace, remove_error)
            raise
        logger.debug("Saved %d questions for %s", len(validated), self.namespace)

    def save_question_papers(self, papers: Sequence[QuestionPaper | Mapping[str, Any]]) -> None:
        """Replace the stored question papers.

        Raises:
            pydantic.ValidationError: If a record is malformed.
            StorageWriteError: If the store cannot persist the collection.
        """
        validated = _PAPERS.validate_python(list(papers))
        self.store.set(self.namespace, QUESTION_PAPERS_KEY, _dump(validated))
        logger.debug("Saved %d question papers for %s", len(validated), self.namespace)

    def clear_all_data(self) -> None:
        """Remove questions, papers and stats.

        Afterwards get_all_questions() returns [] and get_question_stats()
        returns None.
        """
        for key in ALL_KEYS:
            self.store.remove(self.namespace, key)

    # ------------------------------------------------------------------
    # Convenience lookups

    def get_question(self, question_id: str) -> Question | None:
        """Look up one question by ID."""
        return next((q for q in self.get_all_questions() if q.id == question_id), None)

    def get_question_paper(self, paper_id: str) -> QuestionPaper | None:
        """Look up one question paper by ID."""
        return next((p for p in self.get_all_question_papers() if p.id == paper_id), None)

    def get_questions_by_year(self, year: int) -> list[Question]:
        return [q for q in self.get_all_questions() if q.year == year]

    def get_questions_by_subject(self, subject: str) -> list[Question]:
        """Questions whose subject equals the given one, ignoring case."""
        wanted = subject.lower()
        return [q for q in self.get_all_questions() if q.subject.lower() == wanted]

    def get_questions_by_paper_type(self, paper_type: str) -> list[Question]:
        """Questions of a paper type, ignoring case ("gs-i" matches "GS-I")."""
        wanted = paper_type.lower()
        return [q for q in self.get_all_questions() if q.paper_type.lower() == wanted]

    def get_random_questions(
        self,
        count: int | None = None,
        filters: FilterInput = None,
    ) -> list[Question]:
        """Draw distinct questions uniformly at random.

        Args:
            count: How many to draw (default from settings). Capped at the
                number of matching questions; negative counts draw nothing.
            filters: Optional criteria the draw is restricted to.

        Returns:
            Up to count distinct questions in random order
        """
        count = clamp(count, self.settings.default_random_count)
        pool = apply_filters(self.get_all_questions(), _coerce_filter(filters))
        # Random.sample draws without replacement via a partial Fisher-Yates shuffle
        return self._rng.sample(pool, min(count, len(pool)))

    # ------------------------------------------------------------------
    # Composite query

    def search(
        self,
        filters: FilterInput = None,
        search_query: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        limit: int | None = None,
        offset: int | None = 0,
    ) -> QuestionSearchResult:
        """Filter, search, sort and paginate the stored questions.

        Invalid parameters are defaulted or clamped rather than rejected:
        unknown sort keys fall back to the settings defaults, negative
        offsets and limits become 0, and limits above max_limit are capped.

        Args:
            filters: QuestionFilter or equivalent mapping (camelCase or
                snake_case keys).
            search_query: Free-text substring query.
            sort_by: "year", "marks", "difficulty" or "relevance".
            sort_order: "asc" or "desc".
            limit: Page size.
            offset: Number of matches to skip.

        Returns:
            QuestionSearchResult with the page, the pre-pagination total and
            the parameters that were applied.
        """
        question_filter = _coerce_filter(filters)
        resolved_by, resolved_order = normalize_sort(
            sort_by,
            sort_order,
            self.settings.default_sort_by,
            self.settings.default_sort_order,
        )

        matched = apply_filters(self.get_all_questions(), question_filter)
        if search_query:
            matched = apply_search_query(matched, search_query)
        ordered = sort_questions(matched, resolved_by, resolved_order)
        page = paginate(ordered, offset=clamp(offset), limit=self.settings.clamp_limit(limit))

        return QuestionSearchResult(
            questions=page.items,
            total_count=page.total_count,
            filters=question_filter,
            search_query=search_query,
            sort_by=resolved_by,
            sort_order=resolved_order,
            limit=page.limit,
            offset=page.offset,
        )

    # ------------------------------------------------------------------
    # Diagnostics

    def get_data_info(self) -> DataInfo:
        """Counts plus an approximate serialized size in UTF-8 bytes."""
        questions = self.get_all_questions()
        papers = self.get_all_question_papers()

        def size(models: Sequence[BaseModel]) -> int:
            text = json.dumps(_dump(models), separators=(",", ":"), ensure_ascii=False)
            return len(text.encode("utf-8"))

        return DataInfo(
            questions_count=len(questions),
            papers_count=len(papers),
            storage_size=size(questions) + size(papers),
        )


def repository_for(
    store: RecordStore,
    tenant_id: str = DEFAULT_TENANT,
    user_id: str = DEFAULT_USER,
    settings: Settings | None = None,
) -> QuestionRepository:
    """Build the repository for a tenant on a shared store."""
    return QuestionRepository(store, tenant_id=tenant_id, user_id=user_id, settings=settings)
