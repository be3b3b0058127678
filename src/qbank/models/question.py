# src/qbank/models/question.py
"""Question data models."""

from datetime import datetime
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ExamType = Literal["Prelims", "Mains"]
PaperType = Literal["Essay", "GS-I", "GS-II", "GS-III", "GS-IV", "CSAT"]
Difficulty = Literal["Easy", "Medium", "Hard"]
QuestionType = Literal["MCQ", "Descriptive", "Essay"]


class QuestionOption(BaseModel):
    """One answer choice of an MCQ."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    text: str
    is_correct: bool = False


class Question(BaseModel):
    """A single exam question.

    Questions are created once by the ingestion pipeline and never mutated;
    updates replace the whole stored collection.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))

    # Classification
    year: int
    exam_type: ExamType
    paper_type: PaperType
    subject: str
    topic: str
    difficulty: Difficulty
    question_type: QuestionType

    # Content
    question_text: str
    marks: int
    options: list[QuestionOption] | None = None  # MCQ only
    correct_answer: str | None = None  # MCQ only

    # Discovery
    keywords: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    # Optional detail carried through from ingestion
    question_number: int | None = None
    time_allotted: int | None = None  # minutes
    subtopic: str | None = None
    sample_answer: str | None = None
    explanation: str | None = None
    references: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
