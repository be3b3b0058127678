# src/qbank/query/search.py
"""Free-text substring search over question fields."""

from collections.abc import Sequence

from qbank.models import Question


def matches_query(question: Question, query: str) -> bool:
    """Check a lower-cased query against the searchable fields.

    Fields are tried in order: question text, subject, topic, keywords, tags.
    """
    if query in question.question_text.lower():
        return True
    if query in question.subject.lower():
        return True
    if query in question.topic.lower():
        return True
    if any(query in keyword.lower() for keyword in question.keywords):
        return True
    return any(query in tag.lower() for tag in question.tags)


def apply_search_query(questions: Sequence[Question], query: str | None) -> list[Question]:
    """Keep questions where any searchable field contains the query.

    Matching is case-insensitive and whitespace in the query is kept, so
    " art" does not match "party". A None, empty or whitespace-only query
    returns the input unchanged (as a new list).
    """
    if query is None or not query.strip():
        return list(questions)

    needle = query.lower()
    return [q for q in questions if matches_query(q, needle)]
