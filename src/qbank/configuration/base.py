# src/qbank/configuration/base.py
"""Protocol definition for storage configuration objects.

Storage configurations are frozen dataclasses that know how to build a
RecordStore. Any object with a matching build_store() satisfies the
protocol without inheriting from it, while the stores themselves use ABCs
(see qbank.stores.base) because they share behavior through inheritance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from qbank.stores import RecordStore


@runtime_checkable
class StorageConfig(Protocol):
    """Protocol for storage configurations.

    Example implementation:
        @dataclass(frozen=True)
        class LocalStorage:
            data_dir: str

            def build_store(self) -> RecordStore: ...
    """

    def build_store(self) -> RecordStore:
        """Build the record store described by this configuration."""
        ...
