# src/qbank/commands/load.py
"""Load command - save ingested questions and papers into the bank.

The ingestion pipeline writes JSON files; this command reads one and
replaces the tenant's stored collections with its contents.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from qbank.commands.base import LoadResult
from qbank.config import ConfigError, get_repository
from qbank.exceptions import StorageError
from qbank.models import Question, QuestionPaper

PAPER_KEYS = ("questionPapers", "question_papers", "papers")


def parse_payload(payload: Any) -> tuple[list[Any] | None, list[Any] | None]:
    """Split an ingestion payload into (questions, papers).

    Accepted shapes:
    - a list of questions
    - an object with "questions" and/or "questionPapers" lists

    When only papers are given, the questions are taken from the papers
    in order.

    Raises:
        ValueError: If the payload has neither questions nor papers.
    """
    if isinstance(payload, list):
        return payload, None
    if not isinstance(payload, dict):
        raise ValueError("Expected a list of questions or an object with questions/questionPapers")

    questions = payload.get("questions")
    papers = next((payload[key] for key in PAPER_KEYS if key in payload), None)
    if questions is None and papers is None:
        raise ValueError("No 'questions' or 'questionPapers' found in file")
    if questions is not None and not isinstance(questions, list):
        raise ValueError("'questions' must be a list")
    if papers is not None and not isinstance(papers, list):
        raise ValueError("'questionPapers' must be a list")

    if questions is None:
        questions = [
            q for paper in papers if isinstance(paper, dict) for q in paper.get("questions") or []
        ]
    return questions, papers


def load_file(
    path: str,
    tenant_id: str | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> LoadResult:
    """Replace a tenant's questions (and papers, if present) with a file's contents.

    Args:
        path: JSON file produced by the ingestion pipeline
        tenant_id: Override tenant
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        LoadResult with the number of records saved
    """
    file_path = Path(path)
    if not file_path.is_file():
        return LoadResult(success=False, path=path, error=f"File not found: {path}")

    try:
        with open(file_path, encoding="utf-8") as f:
            payload = json.load(f)
        questions, papers = parse_payload(payload)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        return LoadResult(success=False, path=path, error=f"Could not read {path}: {e}")

    repo = get_repository(tenant_id, data_dir, config_path)
    if isinstance(repo, ConfigError):
        return LoadResult(success=False, path=path, error=repo.message)

    try:
        # Validate everything before the first write so a bad record saves nothing
        validated_questions = [Question.model_validate(q) for q in questions]
        validated_papers = (
            [QuestionPaper.model_validate(p) for p in papers] if papers is not None else None
        )
        repo.save_questions(validated_questions)
    except ValidationError as e:
        return LoadResult(
            success=False,
            path=path,
            tenant_id=repo.tenant_id,
            error=f"Invalid records in {path}: {e.error_count()} validation errors",
        )
    except StorageError as e:
        return LoadResult(
            success=False,
            path=path,
            tenant_id=repo.tenant_id,
            error=f"Failed to save: {e}",
        )

    if validated_papers is not None:
        try:
            repo.save_question_papers(validated_papers)
        except StorageError as e:
            return LoadResult(
                success=False,
                path=path,
                tenant_id=repo.tenant_id,
                questions_saved=len(validated_questions),
                error=f"Questions were replaced but papers were not saved: {e}",
            )

    return LoadResult(
        success=True,
        path=path,
        tenant_id=repo.tenant_id,
        questions_saved=len(questions),
        papers_saved=len(papers) if papers is not None else None,
    )
