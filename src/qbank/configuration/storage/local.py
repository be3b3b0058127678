# src/qbank/configuration/storage/local.py
"""Local storage configurations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from qbank.stores import FileRecordStore, SQLiteRecordStore


@dataclass(frozen=True)
class LocalStorage:
    """JSON files on the local filesystem.

    Layout under the data directory:
    - questions/<tenant_id>/upsc_questions.json
    - questions/<tenant_id>/upsc_question_papers.json
    - questions/<tenant_id>/upsc_question_stats.json

    Args:
        data_dir: Base directory for all storage files.
                  Created if it doesn't exist.

    Example:
        repo = QuestionRepository(LocalStorage("./data").build_store(), tenant_id="acme")
    """

    data_dir: str

    def build_store(self) -> FileRecordStore:
        """Build a FileRecordStore rooted at <data_dir>/questions."""
        from qbank.stores import FileRecordStore

        Path(self.data_dir).mkdir(parents=True, exist_ok=True)
        return FileRecordStore(os.path.join(self.data_dir, "questions"))


@dataclass(frozen=True)
class SQLiteStorage:
    """A single SQLite key/value database shared by all tenants.

    Args:
        data_dir: Directory holding records.db. Created if it doesn't exist.
    """

    data_dir: str

    def build_store(self) -> SQLiteRecordStore:
        """Build a SQLiteRecordStore at <data_dir>/records.db."""
        from qbank.stores import SQLiteRecordStore

        Path(self.data_dir).mkdir(parents=True, exist_ok=True)
        return SQLiteRecordStore(os.path.join(self.data_dir, "records.db"))
