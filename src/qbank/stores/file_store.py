# src/qbank/stores/file_store.py
"""Filesystem record store implementation."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from qbank.exceptions import StorageWriteError
from qbank.stores.base import RecordStore, validate_name

logger = logging.getLogger(__name__)

SUFFIX = ".json"


class FileRecordStore(RecordStore):
    """One directory per tenant, one JSON file per key.

    Layout:
        <base_dir>/<tenant_id>/<key>.json
    """

    def __init__(self, base_dir: str) -> None:
        """Initialize the store.

        Args:
            base_dir: Root directory. Tenant directories are created on first write.
        """
        self.base_dir = Path(base_dir)

    def _tenant_dir(self, tenant_id: str) -> Path:
        return self.base_dir / validate_name(tenant_id, "tenant_id")

    def _path(self, tenant_id: str, key: str) -> Path:
        return self._tenant_dir(tenant_id) / f"{validate_name(key)}{SUFFIX}"

    def get(self, tenant_id: str, key: str, default: Any = None) -> Any:
        """Return the stored value, or default if absent or unreadable."""
        path = self._path(tenant_id, key)
        if not path.exists():
            return default
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Could not read %s for tenant %s: %s", key, tenant_id, e)
            return default

    def set(self, tenant_id: str, key: str, value: Any) -> None:
        """Write the value to a temp file, then atomically replace the old file."""
        path = self._path(tenant_id, key)
        try:
            payload = json.dumps(value, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageWriteError(
                f"Value for {key} is not JSON-serializable: {e}", tenant_id, key
            ) from e

        tmp_path: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, path)
            tmp_path = None
        except OSError as e:
            logger.error("Failed to write %s for tenant %s: %s", key, tenant_id, e)
            raise StorageWriteError(f"Failed to write {key}: {e}", tenant_id, key) from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

    def remove(self, tenant_id: str, key: str) -> None:
        """Delete the key's file if it exists."""
        path = self._path(tenant_id, key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageWriteError(f"Failed to remove {key}: {e}", tenant_id, key) from e

    def list_keys(self, tenant_id: str) -> list[str]:
        """List all keys stored for a tenant."""
        tenant_dir = self._tenant_dir(tenant_id)
        if not tenant_dir.is_dir():
            return []
        return sorted(p.stem for p in tenant_dir.glob(f"*{SUFFIX}") if p.is_file())
