# src/qbank/models/paper.py
"""Question paper data model."""

from datetime import datetime
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from qbank.models.question import ExamType, PaperType, Question

ParseStatus = Literal["pending", "processing", "completed", "failed"]


class QuestionPaper(BaseModel):
    """One exam sitting and the questions it contains.

    Papers are a secondary index; the flat question collection is what
    queries run against.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    year: int
    exam_type: ExamType
    paper_type: PaperType
    date: datetime | None = None
    duration: int = 0  # minutes
    total_marks: int = 0
    total_questions: int = 0
    questions: list[Question] = Field(default_factory=list)
    parse_status: ParseStatus = "pending"

    instructions: list[str] = Field(default_factory=list)
    file_name: str | None = None
    file_path: str | None = None
    parse_errors: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_total_questions(cls, data: Any) -> Any:
        # totalQuestions defaults to the number of questions supplied
        if isinstance(data, dict) and not (
            "totalQuestions" in data or "total_questions" in data
        ):
            questions = data.get("questions") or []
            return {**data, "totalQuestions": len(questions)}
        return data

    @model_validator(mode="after")
    def _check_total_questions(self) -> "QuestionPaper":
        if self.total_questions != len(self.questions):
            raise ValueError(
                f"totalQuestions ({self.total_questions}) does not match "
                f"number of questions ({len(self.questions)})"
            )
        return self
