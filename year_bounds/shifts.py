"""
Range-checked calendar arithmetic.

`datetime` raises a mix of ValueError and OverflowError when arithmetic leaves
years 1..9999; both surface here as OutOfRangeError so callers have a single
exception to handle. Values are never clamped or wrapped.
"""

from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, datetime

from .errors import OutOfRangeError
from .time import TICK


def add_years(value: datetime, years: int) -> datetime:
    """
    Move `value` by whole calendar years, keeping month, day, time and tzinfo.

    February 29 becomes February 28 when the target year is not a leap year.
    """

    target = value.year + years
    if not MINYEAR <= target <= MAXYEAR:
        raise OutOfRangeError(
            "add_years",
            f"year {value.year} {years:+d} = {target} is outside [{MINYEAR}, {MAXYEAR}]",
        )

    day = value.day
    if value.month == 2 and day == 29 and not calendar.isleap(target):
        day = 28
    return value.replace(year=target, day=day)


def add_ticks(value: datetime, ticks: int) -> datetime:
    """Move `value` by `ticks` microseconds."""

    try:
        return value + ticks * TICK
    except OverflowError as exc:
        raise OutOfRangeError("add_ticks", f"{value.isoformat()} {ticks:+d} ticks") from exc
