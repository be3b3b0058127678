# src/qbank/models/stats.py
"""Aggregate statistics model."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class QuestionStats(BaseModel):
    """Count-by-dimension breakdown of the stored question collection.

    Every map sums to total_questions.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_questions: int = 0
    by_year: dict[int, int] = Field(default_factory=dict)
    by_subject: dict[str, int] = Field(default_factory=dict)
    by_topic: dict[str, int] = Field(default_factory=dict)
    by_difficulty: dict[str, int] = Field(default_factory=dict)
    by_exam_type: dict[str, int] = Field(default_factory=dict)
    by_paper_type: dict[str, int] = Field(default_factory=dict)
    by_question_type: dict[str, int] = Field(default_factory=dict)

    def breakdowns(self) -> dict[str, dict]:
        """All count maps keyed by dimension name."""
        return {
            "year": self.by_year,
            "subject": self.by_subject,
            "topic": self.by_topic,
            "difficulty": self.by_difficulty,
            "exam_type": self.by_exam_type,
            "paper_type": self.by_paper_type,
            "question_type": self.by_question_type,
        }
