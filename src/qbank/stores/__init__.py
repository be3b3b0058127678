# src/qbank/stores/__init__.py
"""Storage abstractions for the question bank."""

from qbank.stores.base import RecordStore
from qbank.stores.file_store import FileRecordStore
from qbank.stores.sqlite_store import SQLiteRecordStore

__all__ = [
    "RecordStore",
    "FileRecordStore",
    "SQLiteRecordStore",
]
