"""Response formatting helpers for MCP tools.

Tool results are sent straight into an agent's context window, so list
tools support pagination and a verbosity level that controls how much of
each catalog entry is returned.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


class Verbosity(str, Enum):
    """How much detail a tool response carries."""

    MINIMAL = "minimal"
    STANDARD = "standard"
    FULL = "full"

    @classmethod
    def from_str(cls, value: str | None) -> Verbosity:
        """Parse a verbosity string, defaulting to STANDARD."""
        if not value:
            return cls.STANDARD
        try:
            return cls(value.lower())
        except ValueError:
            return cls.STANDARD


def paginate(
    items: list[T], offset: int = 0, limit: int | None = None
) -> tuple[list[T], int]:
    """Slice a list for pagination.

    Args:
        items: Full list of items.
        offset: Number of items to skip.
        limit: Maximum number of items to return (None for all).

    Returns:
        Tuple of (page items, total item count).
    """
    total = len(items)
    offset = max(offset, 0)
    if limit is None:
        return items[offset:], total
    return items[offset : offset + max(limit, 0)], total


class PaginatedResponse:
    """Builder for paginated list responses."""

    @staticmethod
    def build(
        items: list[Any],
        total: int,
        offset: int = 0,
        limit: int | None = None,
    ) -> dict[str, Any]:
        """Build a paginated response dictionary."""
        return {
            "items": items,
            "total": total,
            "offset": offset,
            "limit": limit,
            "returned": len(items),
            "has_more": offset + len(items) < total,
        }
