# src/qbank/configuration/__init__.py
"""Configuration objects for the question bank.

Storage configurations know how to build a record store:
- LocalStorage: one JSON file per key, one directory per tenant
- SQLiteStorage: one SQLite key/value database

Example:
    from qbank import LocalStorage, QuestionRepository

    repo = QuestionRepository(LocalStorage("./data").build_store(), tenant_id="acme")
"""

from qbank.configuration.base import StorageConfig
from qbank.configuration.storage import LocalStorage, SQLiteStorage

__all__ = [
    "StorageConfig",
    "LocalStorage",
    "SQLiteStorage",
]
