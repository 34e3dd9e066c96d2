"""
Units of time understood by `trim`.

Granularities run from TICK (one microsecond, the `datetime` resolution) up to
YEAR. Week granularity is not modelled: its first day is locale dependent.
"""

from __future__ import annotations

from enum import Enum


class UnitOfTime(str, Enum):
    TICK = "TICK"
    MILLISECOND = "MILLISECOND"
    SECOND = "SECOND"
    MINUTE = "MINUTE"
    HOUR = "HOUR"
    DAY = "DAY"
    MONTH = "MONTH"
    QUARTER = "QUARTER"
    YEAR = "YEAR"

    @staticmethod
    def parse(value: "UnitOfTime | str") -> "UnitOfTime":
        """
        Resolve a UnitOfTime from a member or its name (case-insensitive).

        Raises ValueError for unknown names.
        """

        if isinstance(value, UnitOfTime):
            return value
        try:
            return UnitOfTime(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown unit of time: {value!r}") from None
