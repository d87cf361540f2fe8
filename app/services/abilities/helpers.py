"""Pagination and filter helpers shared by the ability classes."""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple, Optional

DEFAULT_LIMIT = 25
MAX_LIMIT = 100
MAX_OFFSET = 100


class Pagination(NamedTuple):
    limit: int
    offset: int


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def normalize_pages(
    limit: Optional[int] = None, offset: Optional[int] = None
) -> Pagination:
    """
    Clamp limit and offset into [0, 100].

    A missing (or zero) limit falls back to 25, a missing offset to 0.
    Out-of-range values are clamped, never rejected.
    """
    return Pagination(
        limit=clamp(limit or DEFAULT_LIMIT, 0, MAX_LIMIT),
        offset=clamp(offset or 0, 0, MAX_OFFSET),
    )


def compact(filters: Mapping[str, Any]) -> dict[str, Any]:
    """Drop absent (None) filters so they never compile into `col IS NULL`."""
    return {key: value for key, value in filters.items() if value is not None}
