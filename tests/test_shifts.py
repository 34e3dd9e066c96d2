"""
Tests for `year_bounds/shifts.py`.

Covers:
- add_years keeps wall time and offset, clamping Feb 29 to Feb 28.
- Results outside years 1..9999 raise OutOfRangeError, never wrap.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from year_bounds.errors import OutOfRangeError
from year_bounds.shifts import add_ticks, add_years

MINUS_FIVE = timezone(timedelta(hours=-5))


@pytest.mark.parametrize(
    "value, years, expected",
    [
        (datetime(2023, 1, 1, tzinfo=MINUS_FIVE), 1, datetime(2024, 1, 1, tzinfo=MINUS_FIVE)),
        (datetime(2023, 1, 1, tzinfo=MINUS_FIVE), -1, datetime(2022, 1, 1, tzinfo=MINUS_FIVE)),
        (datetime(2024, 2, 29, 6, tzinfo=timezone.utc), 1, datetime(2025, 2, 28, 6, tzinfo=timezone.utc)),
        (datetime(2024, 2, 29, 6, tzinfo=timezone.utc), 4, datetime(2028, 2, 29, 6, tzinfo=timezone.utc)),
        (datetime(2023, 6, 15, 12, tzinfo=timezone.utc), 0, datetime(2023, 6, 15, 12, tzinfo=timezone.utc)),
    ],
)
def test_add_years(value: datetime, years: int, expected: datetime) -> None:
    """Verify calendar-year shifts, including the leap day clamp."""

    result = add_years(value, years)
    assert result == expected
    assert result.utcoffset() == value.utcoffset()


@pytest.mark.parametrize(
    "value, years",
    [
        (datetime(9999, 1, 1, tzinfo=timezone.utc), 1),
        (datetime(1, 1, 1, tzinfo=timezone.utc), -1),
    ],
)
def test_add_years_out_of_range(value: datetime, years: int) -> None:
    """Verify years outside 1..9999 raise OutOfRangeError."""

    with pytest.raises(OutOfRangeError):
        add_years(value, years)


def test_add_ticks() -> None:
    """Verify ticks are microseconds."""

    value = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert add_ticks(value, -1) == datetime(2023, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc)
    assert add_ticks(value, 1_000_000) == datetime(2024, 1, 1, 0, 0, 1, tzinfo=timezone.utc)


def test_add_ticks_overflow_is_chained() -> None:
    """Verify overflow at datetime.min surfaces as OutOfRangeError with the cause attached."""

    with pytest.raises(OutOfRangeError) as excinfo:
        add_ticks(datetime(1, 1, 1, tzinfo=timezone.utc), -1)

    assert isinstance(excinfo.value, OverflowError)
    assert isinstance(excinfo.value.__cause__, OverflowError)
    assert excinfo.value.operation == "add_ticks"
