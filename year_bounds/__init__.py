"""
year_bounds: year-boundary helpers for timezone-aware datetimes.

Offset-preserving functions keep the input's UTC offset; the `*_tz_year`
functions resolve boundaries on a time zone's local calendar and return UTC.

`year_bounds.config` reads the YEAR_BOUNDS_DEFAULT_TZ environment variable (or
`.env`) once at import. It only supplies the zone returned by
`get_time_zone()` when no name is given; the boundary functions always take
their zone explicitly.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .errors import OutOfRangeError
from .shifts import add_ticks, add_years
from .time import TICK
from .timezones import get_time_zone, local_to_utc, resolve_time_zone
from .trim import trim
from .unit_of_time import UnitOfTime
from .years import (
    end_of_next_tz_year,
    end_of_next_year,
    end_of_previous_tz_year,
    end_of_previous_year,
    end_of_tz_year,
    end_of_year,
    start_of_next_tz_year,
    start_of_next_year,
    start_of_previous_tz_year,
    start_of_previous_year,
    start_of_tz_year,
    start_of_year,
)

__all__ = [
    "__version__",
    "OutOfRangeError",
    "TICK",
    "UnitOfTime",
    "add_ticks",
    "add_years",
    "end_of_next_tz_year",
    "end_of_next_year",
    "end_of_previous_tz_year",
    "end_of_previous_year",
    "end_of_tz_year",
    "end_of_year",
    "get_time_zone",
    "local_to_utc",
    "resolve_time_zone",
    "start_of_next_tz_year",
    "start_of_next_year",
    "start_of_previous_tz_year",
    "start_of_previous_year",
    "start_of_tz_year",
    "start_of_year",
    "trim",
]
