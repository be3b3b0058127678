# src/qbank/models/filter.py
"""Query filter model."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from qbank.models.question import Difficulty, ExamType, PaperType, QuestionType


class QuestionFilter(BaseModel):
    """Inclusion criteria for a question query.

    Each field is an optional set of acceptable values. Values within a field
    are OR-ed, fields are AND-ed. A missing or empty field places no
    constraint on that dimension.

    Example:
        QuestionFilter(year=[2023, 2024], subject=["history"])
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    year: list[int] | None = None
    exam_type: list[ExamType] | None = None
    paper_type: list[PaperType] | None = None
    subject: list[str] | None = None
    topic: list[str] | None = None
    difficulty: list[Difficulty] | None = None
    question_type: list[QuestionType] | None = None
    keywords: list[str] | None = None
    tags: list[str] | None = None

    def is_empty(self) -> bool:
        """True if no field constrains the result."""
        return not any(getattr(self, name) for name in type(self).model_fields)
