# src/qbank/configuration/storage/__init__.py
"""Storage configurations for the question bank."""

from qbank.configuration.storage.local import LocalStorage, SQLiteStorage

__all__ = ["LocalStorage", "SQLiteStorage"]
