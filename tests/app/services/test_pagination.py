"""Tests for pagination normalization and filter compaction."""

import pytest

from app.services.abilities.helpers import Pagination, compact, normalize_pages


def test_defaults_when_absent():
    assert normalize_pages() == Pagination(limit=25, offset=0)


@pytest.mark.parametrize(
    "limit, offset, expected",
    [
        (10, 5, Pagination(10, 5)),
        (1000, 1000, Pagination(100, 100)),
        (-5, -5, Pagination(0, 0)),
        (100, 100, Pagination(100, 100)),
        (0, 0, Pagination(25, 0)),
        (None, 42, Pagination(25, 42)),
    ],
)
def test_clamps_into_bounds(limit, offset, expected):
    assert normalize_pages(limit, offset) == expected


def test_normalized_values_always_in_range():
    for raw in range(-300, 301, 7):
        pages = normalize_pages(raw, raw)
        assert 0 <= pages.limit <= 100
        assert 0 <= pages.offset <= 100


def test_compact_drops_none_but_keeps_falsy_values():
    assert compact({"id": None, "type": "customer", "customer_id": 0}) == {
        "type": "customer",
        "customer_id": 0,
    }


def test_compact_empty():
    assert compact({"id": None}) == {}
