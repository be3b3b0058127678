# src/qbank/aggregator.py
"""Statistics aggregation over a question collection."""

from collections import Counter
from collections.abc import Sequence

from qbank.models import Question, QuestionStats


def compute_stats(questions: Sequence[Question]) -> QuestionStats:
    """Compute all count-by-dimension maps from one snapshot.

    Always a full recomputation; every map is built in the same pass so
    they can never disagree with each other or with total_questions.
    """
    by_year: Counter[int] = Counter()
    by_subject: Counter[str] = Counter()
    by_topic: Counter[str] = Counter()
    by_difficulty: Counter[str] = Counter()
    by_exam_type: Counter[str] = Counter()
    by_paper_type: Counter[str] = Counter()
    by_question_type: Counter[str] = Counter()

    for q in questions:
        by_year[q.year] += 1
        by_subject[q.subject] += 1
        by_topic[q.topic] += 1
        by_difficulty[q.difficulty] += 1
        by_exam_type[q.exam_type] += 1
        by_paper_type[q.paper_type] += 1
        by_question_type[q.question_type] += 1

    return QuestionStats(
        total_questions=len(questions),
        by_year=dict(by_year),
        by_subject=dict(by_subject),
        by_topic=dict(by_topic),
        by_difficulty=dict(by_difficulty),
        by_exam_type=dict(by_exam_type),
        by_paper_type=dict(by_paper_type),
        by_question_type=dict(by_question_type),
    )
