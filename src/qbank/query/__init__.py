# src/qbank/query/__init__.py
"""Filter, search, sort and pagination stages of a question query."""

from qbank.query.filters import apply_filters, contains_any, matches
from qbank.query.pagination import Page, paginate
from qbank.query.search import apply_search_query, matches_query
from qbank.query.sorting import DIFFICULTY_RANK, normalize_sort, sort_questions

__all__ = [
    "apply_filters",
    "contains_any",
    "matches",
    "apply_search_query",
    "matches_query",
    "sort_questions",
    "normalize_sort",
    "DIFFICULTY_RANK",
    "Page",
    "paginate",
]
