"""Shared pytest fixtures."""

import os
import random
import tempfile

import pytest

from qbank.models import Question
from qbank.repository import QuestionRepository
from qbank.stores import FileRecordStore


def make_question(**overrides) -> Question:
    """Build a valid question, overriding any field."""
    fields = {
        "year": 2023,
        "exam_type": "Mains",
        "paper_type": "GS-I",
        "subject": "History",
        "topic": "Modern India",
        "difficulty": "Medium",
        "question_type": "Descriptive",
        "question_text": "Discuss the role of the Indian National Congress.",
        "marks": 10,
    }
    fields.update(overrides)
    return Question(**fields)


@pytest.fixture(name="make_question")
def make_question_fixture():
    """Factory for valid questions with overridable fields."""
    return make_question


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def file_store(temp_dir):
    return FileRecordStore(os.path.join(temp_dir, "questions"))


@pytest.fixture
def repo(file_store):
    """Repository for the default tenant with a seeded random source."""
    return QuestionRepository(file_store, tenant_id="acme", rng=random.Random(42))


@pytest.fixture
def three_questions():
    """The history/geography collection used in query examples."""
    return [
        make_question(id="q1", year=2023, subject="History", difficulty="Easy", marks=10),
        make_question(id="q2", year=2023, subject="Geography", difficulty="Hard", marks=15),
        make_question(id="q3", year=2024, subject="History", difficulty="Medium", marks=5),
    ]


@pytest.fixture
def varied_questions():
    """A collection covering every filterable dimension."""
    return [
        make_question(
            id="h1",
            year=2022,
            exam_type="Prelims",
            paper_type="GS-I",
            subject="History",
            topic="Ancient India",
            difficulty="Easy",
            question_type="MCQ",
            question_text="Which dynasty built the Sanchi stupa?",
            marks=2,
            options=[
                {"id": "a", "text": "Mauryas", "isCorrect": True},
                {"id": "b", "text": "Guptas"},
            ],
            correct_answer="a",
            keywords=["Buddhism", "Architecture"],
            tags=["art-culture"],
        ),
        make_question(
            id="g1",
            year=2023,
            paper_type="GS-I",
            subject="Geography",
            topic="Monsoon",
            difficulty="Hard",
            question_text="Explain the mechanism of the Indian monsoon.",
            marks=15,
            keywords=["climate", "El Nino"],
            tags=["physical-geography"],
        ),
        make_question(
            id="p1",
            year=2023,
            paper_type="GS-II",
            subject="Polity",
            topic="Federalism",
            difficulty="Medium",
            question_text="Critically examine cooperative federalism.",
            marks=10,
            keywords=["Centre-State relations"],
            tags=["constitution"],
        ),
        make_question(
            id="e1",
            year=2024,
            paper_type="GS-III",
            subject="Economy",
            topic="Inflation",
            difficulty="Medium",
            question_text="How does monetary policy control inflation?",
            marks=15,
            keywords=["RBI", "repo rate"],
            tags=["macro"],
        ),
        make_question(
            id="s1",
            year=2024,
            paper_type="Essay",
            subject="Essay",
            topic="Society",
            difficulty="Hard",
            question_type="Essay",
            question_text="Education is the most powerful weapon.",
            marks=125,
        ),
    ]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep QBANK_* variables and stray config files out of every test."""
    for name in list(os.environ):
        if name.startswith("QBANK_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
