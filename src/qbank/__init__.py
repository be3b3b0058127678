"""Question bank query engine.

Stores past exam questions and question papers per tenant and answers
filter, free-text, sort and pagination queries over them, plus random
practice sets and count-by-dimension statistics.

Quick Start (Local Storage):
    from qbank import LocalStorage, QuestionRepository

    repo = QuestionRepository(LocalStorage("./qbank_data").build_store(), tenant_id="acme")
    repo.save_questions(questions)

    page = repo.search(
        {"year": [2023], "subject": ["History"]},
        search_query="mughal",
        sort_by="marks",
        sort_order="desc",
        limit=20,
    )
    practice = repo.get_random_questions(10, {"paperType": ["GS-I"]})
    stats = repo.get_question_stats()

From Configuration (qbank.yaml + QBANK_* env vars):
    from qbank import get_repository

    repo = get_repository(tenant_id="acme")
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("qbank-engine")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except (OSError, ValueError):
        __version__ = "unknown"

# Statistics
from qbank.aggregator import compute_stats

# Configuration loading
from qbank.config import ConfigError, get_repository

# Configuration objects
from qbank.configuration import LocalStorage, SQLiteStorage, StorageConfig

# Errors
from qbank.exceptions import InvalidKeyError, QBankError, StorageError, StorageWriteError

# Models
from qbank.models import (
    DataInfo,
    Question,
    QuestionFilter,
    QuestionOption,
    QuestionPaper,
    QuestionSearchResult,
    QuestionStats,
)

# Repository
from qbank.repository import QuestionRepository, repository_for

# Settings
from qbank.settings import Settings

# Storage
from qbank.stores import FileRecordStore, RecordStore, SQLiteRecordStore

__all__ = [
    # Version
    "__version__",
    # Models
    "Question",
    "QuestionOption",
    "QuestionPaper",
    "QuestionFilter",
    "QuestionStats",
    "QuestionSearchResult",
    "DataInfo",
    # Config
    "Settings",
    "ConfigError",
    "get_repository",
    # Configuration objects
    "StorageConfig",
    "LocalStorage",
    "SQLiteStorage",
    # Storage
    "RecordStore",
    "FileRecordStore",
    "SQLiteRecordStore",
    # Repository
    "QuestionRepository",
    "repository_for",
    "compute_stats",
    # Errors
    "QBankError",
    "StorageError",
    "StorageWriteError",
    "InvalidKeyError",
]
