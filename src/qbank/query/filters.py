# src/qbank/query/filters.py
"""Multi-criteria question filtering."""

from collections.abc import Callable, Iterable, Sequence

from qbank.models import Question, QuestionFilter

# Filter field -> Question attribute for exact-membership dimensions
EXACT_FIELDS = ("year", "exam_type", "paper_type", "difficulty", "question_type")

# Free-text labels that are not a closed enumeration
TEXT_FIELDS = ("subject", "topic")

# List-valued question attributes
COLLECTION_FIELDS = ("keywords", "tags")


def contains_any(value: str, candidates: Iterable[str]) -> bool:
    """True if any candidate is a case-insensitive substring of value."""
    haystack = value.lower()
    return any(c.lower() in haystack for c in candidates)


def _exact(field: str, allowed: Sequence) -> Callable[[Question], bool]:
    allowed_set = set(allowed)
    return lambda q: getattr(q, field) in allowed_set


def _text(field: str, candidates: Sequence[str]) -> Callable[[Question], bool]:
    return lambda q: contains_any(getattr(q, field), candidates)


def _collection(field: str, candidates: Sequence[str]) -> Callable[[Question], bool]:
    return lambda q: any(contains_any(item, candidates) for item in getattr(q, field))


def build_predicates(filters: QuestionFilter) -> list[Callable[[Question], bool]]:
    """Build one predicate per constrained filter field.

    Fields that are None or empty produce no predicate.
    """
    predicates: list[Callable[[Question], bool]] = []
    for field in EXACT_FIELDS:
        values = getattr(filters, field)
        if values:
            predicates.append(_exact(field, values))
    for field in TEXT_FIELDS:
        values = getattr(filters, field)
        if values:
            predicates.append(_text(field, values))
    for field in COLLECTION_FIELDS:
        values = getattr(filters, field)
        if values:
            predicates.append(_collection(field, values))
    return predicates


def matches(question: Question, filters: QuestionFilter) -> bool:
    """True if the question satisfies every constrained field of the filter."""
    return all(predicate(question) for predicate in build_predicates(filters))


def apply_filters(
    questions: Sequence[Question],
    filters: QuestionFilter | None,
) -> list[Question]:
    """Return the questions matching all present criteria, in input order.

    Args:
        questions: Collection to filter. Not modified.
        filters: Criteria to apply. None or an empty filter keeps everything.

    Returns:
        New list of matching questions
    """
    if filters is None:
        return list(questions)

    predicates = build_predicates(filters)
    if not predicates:
        return list(questions)

    return [q for q in questions if all(predicate(q) for predicate in predicates)]
