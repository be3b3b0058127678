# src/qbank/stores/sqlite_store.py
"""SQLite record store implementation."""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any

from qbank.exceptions import StorageWriteError
from qbank.stores.base import RecordStore, validate_name

logger = logging.getLogger(__name__)


class SQLiteRecordStore(RecordStore):
    """SQLite-backed persistent key/value map, scoped by tenant."""

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite record store."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS records (
                    tenant_id TEXT NOT NULL,
                    key TEXT NOT NULL,
                    value TEXT NOT NULL,
                    PRIMARY KEY (tenant_id, key)
                )
            """)
            conn.commit()

    def get(self, tenant_id: str, key: str, default: Any = None) -> Any:
        """Return the stored value, or default if absent or unreadable."""
        validate_name(tenant_id, "tenant_id")
        validate_name(key)
        try:
            with sqlite3.connect(self.db_path) as conn:
                cursor = conn.execute(
                    "SELECT value FROM records WHERE tenant_id = ? AND key = ?",
                    (tenant_id, key),
                )
                row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read %s for tenant %s: %s", key, tenant_id, e)
            return default
        if row is None:
            return default
        try:
            return json.loads(row[0])
        except json.JSONDecodeError as e:
            logger.warning("Corrupt value for %s (tenant %s): %s", key, tenant_id, e)
            return default

    def set(self, tenant_id: str, key: str, value: Any) -> None:
        """Store a value, overwriting if it exists."""
        validate_name(tenant_id, "tenant_id")
        validate_name(key)
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageWriteError(
                f"Value for {key} is not JSON-serializable: {e}", tenant_id, key
            ) from e
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute(
                    """
                    INSERT OR REPLACE INTO records (tenant_id, key, value)
                    VALUES (?, ?, ?)
                    """,
                    (tenant_id, key, payload),
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.error("Failed to write %s for tenant %s: %s", key, tenant_id, e)
            raise StorageWriteError(f"Failed to write {key}: {e}", tenant_id, key) from e

    def remove(self, tenant_id: str, key: str) -> None:
        """Delete a key."""
        validate_name(tenant_id, "tenant_id")
        validate_name(key)
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute(
                    "DELETE FROM records WHERE tenant_id = ? AND key = ?",
                    (tenant_id, key),
                )
                conn.commit()
        except sqlite3.Error as e:
            raise StorageWriteError(f"Failed to remove {key}: {e}", tenant_id, key) from e

    def list_keys(self, tenant_id: str) -> list[str]:
        """List all keys stored for a tenant, or [] if the database is unreadable."""
        validate_name(tenant_id, "tenant_id")
        try:
            with sqlite3.connect(self.db_path) as conn:
                cursor = conn.execute(
                    "SELECT key FROM records WHERE tenant_id = ? ORDER BY key",
                    (tenant_id,),
                )
                return [row[0] for row in cursor.fetchall()]
        except sqlite3.Error as e:
            logger.warning("Could not list keys for tenant %s: %s", tenant_id, e)
            return []

    def clear_tenant(self, tenant_id: str) -> None:
        """Remove every key stored for a tenant in one statement."""
        validate_name(tenant_id, "tenant_id")
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute("DELETE FROM records WHERE tenant_id = ?", (tenant_id,))
                conn.commit()
        except sqlite3.Error as e:
            raise StorageWriteError(f"Failed to clear tenant: {e}", tenant_id, "*") from e
