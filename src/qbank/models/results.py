# src/qbank/models/results.py
"""Result data models for question bank queries."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from qbank.models.filter import QuestionFilter
from qbank.models.question import Question

SortBy = Literal["year", "marks", "difficulty", "relevance"]
SortOrder = Literal["asc", "desc"]


class QuestionSearchResult(BaseModel):
    """One page of a composite query, plus the parameters that produced it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    questions: list[Question]
    total_count: int  # matches before pagination
    filters: QuestionFilter = Field(default_factory=QuestionFilter)
    search_query: str | None = None
    sort_by: SortBy = "year"
    sort_order: SortOrder = "desc"
    limit: int = 50
    offset: int = 0


class DataInfo(BaseModel):
    """Storage diagnostics for one tenant."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    questions_count: int
    papers_count: int
    storage_size: int  # approximate, in UTF-8 bytes
