"""Tests for booking periods, the overlap rule and day counting."""

from __future__ import annotations

from datetime import date

import pytest

from car_rental_admin.domain.booking import BookingPeriod, inclusive_day_count, overlaps
from car_rental_admin.domain.errors import ValidationError


def period(start: str, end: str) -> BookingPeriod:
    return BookingPeriod(start=date.fromisoformat(start), end=date.fromisoformat(end))


# ==============================================================================
# Overlap Rule
# ==============================================================================


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        # Fully before / after
        (period("2025-01-01", "2025-01-05"), period("2025-01-06", "2025-01-10"), False),
        (period("2025-01-11", "2025-01-20"), period("2025-01-01", "2025-01-10"), False),
        # Touching on a single day counts as overlap
        (period("2025-01-01", "2025-01-10"), period("2025-01-10", "2025-01-12"), True),
        (period("2025-01-10", "2025-01-12"), period("2025-01-01", "2025-01-10"), True),
        # Partial and full containment
        (period("2025-01-01", "2025-01-10"), period("2025-01-05", "2025-01-15"), True),
        (period("2025-01-01", "2025-01-31"), period("2025-01-10", "2025-01-12"), True),
        # Single-day periods
        (period("2025-01-10", "2025-01-10"), period("2025-01-10", "2025-01-10"), True),
        (period("2025-01-10", "2025-01-10"), period("2025-01-11", "2025-01-11"), False),
    ],
)
def test_overlaps(a: BookingPeriod, b: BookingPeriod, expected: bool) -> None:
    """Periods overlap when they share at least one day, endpoints included."""
    assert overlaps(a, b) is expected


def test_overlaps_is_symmetric() -> None:
    a = period("2025-01-01", "2025-01-10")
    b = period("2025-01-10", "2025-01-20")

    assert overlaps(a, b) == overlaps(b, a)


# ==============================================================================
# Day Counting
# ==============================================================================


def test_inclusive_day_count_counts_both_ends() -> None:
    """A rental from the 10th to the 12th is three days."""
    assert inclusive_day_count(date(2025, 1, 10), date(2025, 1, 12)) == 3


def test_inclusive_day_count_same_day_is_one() -> None:
    assert inclusive_day_count(date(2025, 1, 10), date(2025, 1, 10)) == 1


def test_inclusive_day_count_across_month_end() -> None:
    assert inclusive_day_count(date(2025, 1, 30), date(2025, 2, 2)) == 4


def test_inclusive_day_count_reversed_is_zero() -> None:
    assert inclusive_day_count(date(2025, 1, 12), date(2025, 1, 10)) == 0


@pytest.mark.parametrize(
    ("start", "end"),
    [(None, date(2025, 1, 10)), (date(2025, 1, 10), None), (None, None)],
)
def test_inclusive_day_count_missing_date_is_zero(start: date | None, end: date | None) -> None:
    assert inclusive_day_count(start, end) == 0


# ==============================================================================
# Validation
# ==============================================================================


def test_validate_accepts_single_day_period() -> None:
    period("2025-01-10", "2025-01-10").validate()


def test_validate_rejects_reversed_period() -> None:
    with pytest.raises(ValidationError) as exc_info:
        period("2025-01-12", "2025-01-10").validate()

    assert exc_info.value.errors == [
        {
            "field": "end_date",
            "message": "Must be on or after start_date",
            "code": "INVALID_RANGE",
        }
    ]


def test_to_dict_uses_iso_dates() -> None:
    assert period("2025-01-10", "2025-01-15").to_dict() == {
        "start": "2025-01-10",
        "end": "2025-01-15",
    }
