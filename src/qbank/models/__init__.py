# src/qbank/models/__init__.py
"""Data models for the question bank."""

from qbank.models.filter import QuestionFilter
from qbank.models.paper import ParseStatus, QuestionPaper
from qbank.models.question import (
    Difficulty,
    ExamType,
    PaperType,
    Question,
    QuestionOption,
    QuestionType,
)
from qbank.models.results import DataInfo, QuestionSearchResult, SortBy, SortOrder
from qbank.models.stats import QuestionStats

__all__ = [
    "Question",
    "QuestionOption",
    "QuestionPaper",
    "QuestionFilter",
    "QuestionStats",
    "QuestionSearchResult",
    "DataInfo",
    "ExamType",
    "PaperType",
    "Difficulty",
    "QuestionType",
    "ParseStatus",
    "SortBy",
    "SortOrder",
]
