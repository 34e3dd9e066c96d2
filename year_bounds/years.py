"""
Year boundaries for timezone-aware datetimes.

Two families of functions live here:

- Offset-preserving (`start_of_year`, `end_of_year`, ...): work on the value's
  own wall clock and return a datetime bound to the same UTC offset as the
  input. No time zone conversion is performed.
- Zone-resolved (`start_of_tz_year`, `end_of_tz_year`, ...): treat the input
  as an absolute instant, find the year that contains it on the wall clock of
  `tz`, and return the boundary as a UTC datetime. Boundaries are built as
  local wall time (Jan 1, 00:00) and mapped through the zone's rules, so they
  are DST-safe; see `year_bounds.timezones.local_to_utc` for how nonexistent
  and ambiguous wall times are resolved.

The neighbouring zone boundaries (next, previous, year after next) are each
resolved from their own local Jan 1, deliberately not by adding whole years to
the UTC start: a zone whose Jan 1 offset changes between years (Europe/Moscow,
+4 in 2014 and +3 in 2015) would otherwise get boundaries an hour off local
midnight.

"End of year" is always one tick (one microsecond) before the start of the
following year. Results outside years 1..9999 raise OutOfRangeError.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo

from .errors import OutOfRangeError
from .shifts import add_ticks, add_years
from .time import require_aware_timestamp, to_fixed_offset
from .timezones import local_to_utc, resolve_time_zone
from .trim import trim
from .unit_of_time import UnitOfTime


def start_of_year(value: datetime) -> datetime:
    """Return the first moment of the year containing `value`, keeping its offset."""

    require_aware_timestamp("value", value)
    return trim(to_fixed_offset(value), UnitOfTime.YEAR)


def end_of_year(value: datetime) -> datetime:
    """Return the last tick of the year containing `value`, keeping its offset."""

    return add_ticks(add_years(start_of_year(value), 1), -1)


def start_of_next_year(value: datetime) -> datetime:
    return add_years(start_of_year(value), 1)


def start_of_previous_year(value: datetime) -> datetime:
    return add_years(start_of_year(value), -1)


def end_of_previous_year(value: datetime) -> datetime:
    """One tick before the start of the year containing `value`."""

    return add_ticks(start_of_year(value), -1)


def end_of_next_year(value: datetime) -> datetime:
    """One tick before the start of the year after next."""

    return add_ticks(add_years(start_of_year(value), 2), -1)


def start_of_tz_year(value: datetime, tz: tzinfo | str) -> datetime:
    """
    Start of the year in `tz` that contains the instant `value`, as UTC.

    Args:
        value: Any timezone-aware datetime. Only the instant matters; its own
            offset is discarded.
        tz: The zone whose local calendar defines the year, as a tzinfo or an
            IANA key.

    Returns:
        A datetime with tzinfo=timezone.utc.

    Raises:
        ValueError: `value` is naive.
        zoneinfo.ZoneInfoNotFoundError: `tz` is an unknown key.
        OutOfRangeError: The boundary is not representable.

    Example:
        >>> start_of_tz_year(datetime(2023, 7, 4, 12, tzinfo=timezone.utc), "America/New_York")
        datetime.datetime(2023, 1, 1, 5, 0, tzinfo=datetime.timezone.utc)
    """

    return _tz_year_start(value, tz, 0)


def end_of_tz_year(value: datetime, tz: tzinfo | str) -> datetime:
    """Last tick of the year in `tz` that contains `value`, as UTC."""

    return add_ticks(_tz_year_start(value, tz, 1), -1)


def start_of_next_tz_year(value: datetime, tz: tzinfo | str) -> datetime:
    """Start of the year after the one in `tz` that contains `value`, as UTC."""

    return _tz_year_start(value, tz, 1)


def start_of_previous_tz_year(value: datetime, tz: tzinfo | str) -> datetime:
    """Start of the year before the one in `tz` that contains `value`, as UTC."""

    return _tz_year_start(value, tz, -1)


def end_of_previous_tz_year(value: datetime, tz: tzinfo | str) -> datetime:
    """Last tick before the year in `tz` that contains `value`, as UTC."""

    return add_ticks(_tz_year_start(value, tz, 0), -1)


def end_of_next_tz_year(value: datetime, tz: tzinfo | str) -> datetime:
    """Last tick of the year after the one in `tz` that contains `value`, as UTC."""

    return add_ticks(_tz_year_start(value, tz, 2), -1)


def _tz_year_start(value: datetime, tz: tzinfo | str, years: int) -> datetime:
    """
    Resolve Jan 1, 00:00 of (local year of `value` in `tz`) + `years` to UTC.

    Each boundary is mapped through the zone separately: a zone's offset on
    Jan 1 can change from one year to the next.
    """

    require_aware_timestamp("value", value)
    zone = resolve_time_zone(tz)

    try:
        local = value.astimezone(timezone.utc).astimezone(zone)
    except OverflowError as exc:
        raise OutOfRangeError("start_of_tz_year", f"{value.isoformat()} in {zone}") from exc

    wall_start = add_years(datetime(local.year, 1, 1), years)
    try:
        return local_to_utc(wall_start, zone)
    except OverflowError as exc:
        raise OutOfRangeError("start_of_tz_year", f"{wall_start.isoformat()} in {zone}") from exc
