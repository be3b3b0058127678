# src/qbank/exceptions.py
"""Exceptions for the question bank."""


class QBankError(Exception):
    """Base class for question bank errors."""


class StorageError(QBankError):
    """Raised when the record store cannot complete an operation."""


class StorageWriteError(StorageError):
    """Raised when a value could not be durably written or removed.

    Attributes:
        tenant_id: Tenant namespace of the failed write.
        key: Record key of the failed write.
    """

    def __init__(self, message: str, tenant_id: str, key: str) -> None:
        super().__init__(message)
        self.tenant_id = tenant_id
        self.key = key


class InvalidKeyError(QBankError, ValueError):
    """Raised for tenant IDs or record keys that cannot be stored safely."""
