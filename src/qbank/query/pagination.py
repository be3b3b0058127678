# src/qbank/query/pagination.py
"""Offset/limit pagination."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """A slice of a collection plus the size of the whole collection.

    Attributes:
        items: Items on this page
        total_count: Number of items before slicing
        offset: Offset actually applied (after clamping)
        limit: Limit actually applied (after clamping)
    """

    items: list[T] = field(default_factory=list)
    total_count: int = 0
    offset: int = 0
    limit: int = 0


def clamp(value: int | None, default: int = 0) -> int:
    """Clamp a page parameter to a non-negative int."""
    if value is None:
        return default
    return max(0, int(value))


def paginate(items: Sequence[T], offset: int = 0, limit: int = 50) -> Page[T]:
    """Slice items by offset and limit.

    Negative values are clamped to 0 rather than rejected. An offset past the
    end yields an empty page with the full total_count.
    """
    offset = clamp(offset)
    limit = clamp(limit)
    return Page(
        items=list(items[offset : offset + limit]),
        total_count=len(items),
        offset=offset,
        limit=limit,
    )
