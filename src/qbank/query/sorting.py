# src/qbank/query/sorting.py
"""Stable ordering of question collections."""

import logging
from collections.abc import Callable, Sequence
from typing import cast

from qbank.models import Question, SortBy, SortOrder

logger = logging.getLogger(__name__)

DIFFICULTY_RANK: dict[str, int] = {"Easy": 1, "Medium": 2, "Hard": 3}

# "relevance" orders by year. It is a placeholder, not a scored ranking.
# TODO: score against the search query once a ranking function is agreed on.
SORT_KEYS: dict[str, Callable[[Question], int]] = {
    "year": lambda q: q.year,
    "marks": lambda q: q.marks,
    "difficulty": lambda q: DIFFICULTY_RANK[q.difficulty],
    "relevance": lambda q: q.year,
}

SORT_ORDERS = ("asc", "desc")
DEFAULT_SORT_BY: SortBy = "year"
DEFAULT_SORT_ORDER: SortOrder = "desc"


def normalize_sort(
    sort_by: str | None,
    sort_order: str | None,
    default_sort_by: SortBy = DEFAULT_SORT_BY,
    default_sort_order: SortOrder = DEFAULT_SORT_ORDER,
) -> tuple[SortBy, SortOrder]:
    """Resolve sort parameters, replacing unknown values with defaults."""
    resolved_by = sort_by if sort_by in SORT_KEYS else default_sort_by
    resolved_order = sort_order if sort_order in SORT_ORDERS else default_sort_order
    if sort_by is not None and resolved_by != sort_by:
        logger.debug("Unknown sort key %r, using %r", sort_by, resolved_by)
    if sort_order is not None and resolved_order != sort_order:
        logger.debug("Unknown sort order %r, using %r", sort_order, resolved_order)
    return cast(SortBy, resolved_by), cast(SortOrder, resolved_order)


def sort_questions(
    questions: Sequence[Question],
    sort_by: str | None = DEFAULT_SORT_BY,
    sort_order: str | None = DEFAULT_SORT_ORDER,
) -> list[Question]:
    """Return a sorted copy of the questions.

    The sort is stable in both directions: questions with equal keys keep
    their input order, so repeated identical queries paginate identically.

    Args:
        questions: Collection to sort. Not modified.
        sort_by: "year", "marks", "difficulty" or "relevance"
        sort_order: "asc" or "desc"

    Returns:
        New sorted list
    """
    resolved_by, resolved_order = normalize_sort(sort_by, sort_order)
    return sorted(questions, key=SORT_KEYS[resolved_by], reverse=resolved_order == "desc")
