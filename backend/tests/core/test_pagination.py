"""Pagination - verifies offset/limit defaulting and open date bounds."""

from datetime import date

import pytest

from billing.core.pagination import (
    DEFAULT_LIMIT, DateRange, Page, normalize_page, resolve_due_date_bounds,
)


def test_negative_offset_and_zero_limit_defaulted():
    assert normalize_page(-1, 0) == normalize_page(0, 100) == Page(0, 100)


@pytest.mark.parametrize("limit", [0, -5])
def test_non_positive_limit_becomes_default(limit):
    assert normalize_page(10, limit).limit == DEFAULT_LIMIT


def test_valid_values_pass_through():
    assert normalize_page(20, 5) == Page(offset=20, limit=5)


def test_missing_bounds_are_open():
    bounds = resolve_due_date_bounds(None, None)
    assert bounds == DateRange(date.min, date.max)
    assert not bounds.is_empty


def test_single_bound_kept():
    bounds = resolve_due_date_bounds(date(2024, 1, 1), None)
    assert bounds.start == date(2024, 1, 1)
    assert bounds.end == date.max


def test_inverted_range_is_empty():
    assert resolve_due_date_bounds(date(2024, 2, 1), date(2024, 1, 1)).is_empty


def test_single_day_range_not_empty():
    day = date(2024, 3, 31)
    assert not resolve_due_date_bounds(day, day).is_empty
