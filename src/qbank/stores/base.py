# src/qbank/stores/base.py
"""Abstract base class for record storage."""

from abc import ABC, abstractmethod
from typing import Any

from qbank.exceptions import InvalidKeyError


def validate_name(name: str, kind: str = "key") -> str:
    """Check that a tenant ID or key is safe to use as a storage name.

    Raises:
        InvalidKeyError: If the name is empty, a relative path component,
            or contains a path separator.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidKeyError(f"{kind} must be a non-empty string")
    if name in (".", "..") or "/" in name or "\\" in name or "\x00" in name:
        raise InvalidKeyError(f"Invalid {kind}: {name!r}")
    return name


class RecordStore(ABC):
    """Tenant-scoped storage of named JSON values.

    Implementations only provide durability and tenant isolation; they hold
    no query logic. Reads never raise for missing or corrupt data.
    """

    @abstractmethod
    def get(self, tenant_id: str, key: str, default: Any = None) -> Any:
        """Return the stored value, or default if absent or unreadable."""
        ...

    @abstractmethod
    def set(self, tenant_id: str, key: str, value: Any) -> None:
        """Persist a JSON-serializable value. Raises StorageWriteError on failure."""
        ...

    @abstractmethod
    def remove(self, tenant_id: str, key: str) -> None:
        """Delete a key. Missing keys are ignored."""
        ...

    @abstractmethod
    def list_keys(self, tenant_id: str) -> list[str]:
        """List all keys stored for a tenant, sorted."""
        ...

    def clear_tenant(self, tenant_id: str) -> None:
        """Remove every key stored for a tenant."""
        for key in self.list_keys(tenant_id):
            self.remove(tenant_id, key)
