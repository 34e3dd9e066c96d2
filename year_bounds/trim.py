"""
Truncation of timestamps to a unit of time.

`trim` clears every field finer than the requested unit and keeps the
`tzinfo` untouched: the result is the start of that unit on the value's own
wall clock.
"""

from __future__ import annotations

from datetime import datetime

from .time import require_aware_timestamp
from .unit_of_time import UnitOfTime


def trim(value: datetime, unit: UnitOfTime | str) -> datetime:
    """
    Truncate `value` to the first instant of the `unit` that contains it.

    Examples:
        >>> trim(datetime(2023, 8, 14, 9, 30, tzinfo=timezone.utc), UnitOfTime.YEAR)
        datetime.datetime(2023, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)

        >>> trim(datetime(2023, 8, 14, 9, 30, tzinfo=timezone.utc), "quarter")
        datetime.datetime(2023, 7, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """

    require_aware_timestamp("value", value)
    unit = UnitOfTime.parse(unit)

    if unit is UnitOfTime.TICK:
        return value
    if unit is UnitOfTime.MILLISECOND:
        return value.replace(microsecond=value.microsecond - value.microsecond % 1000)
    if unit is UnitOfTime.SECOND:
        return value.replace(microsecond=0)
    if unit is UnitOfTime.MINUTE:
        return value.replace(second=0, microsecond=0)
    if unit is UnitOfTime.HOUR:
        return value.replace(minute=0, second=0, microsecond=0)

    start_of_day = value.replace(hour=0, minute=0, second=0, microsecond=0, fold=0)
    if unit is UnitOfTime.DAY:
        return start_of_day
    if unit is UnitOfTime.MONTH:
        return start_of_day.replace(day=1)
    if unit is UnitOfTime.QUARTER:
        first_month = value.month - (value.month - 1) % 3
        return start_of_day.replace(month=first_month, day=1)
    return start_of_day.replace(month=1, day=1)
