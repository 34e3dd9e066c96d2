"""
Time zone lookup and wall-clock to UTC conversion.

Zones come from `zoneinfo` (system tz database, or the `tzdata` package where
the system has none). Lookup failures are never masked: an unknown key raises
`zoneinfo.ZoneInfoNotFoundError` to the caller.

Wall-clock conversion policy (`local_to_utc`):
- A wall time that exists exactly once maps to that instant.
- A wall time inside a spring-forward gap does not exist; it maps to the first
  valid instant after the gap, which is the transition instant itself.
- A wall time inside a fall-back overlap occurs twice; it maps to the
  standard-time occurrence (the one whose `dst()` is zero). When both or
  neither occurrence is standard time, the earlier occurrence wins, so the
  tick before a resolved Jan 1 boundary is still in the previous local year.

`zoneinfo` on its own would resolve both cases with `fold=0` (PEP 495), which
places gap times one gap-length past the transition and always picks the
earlier occurrence of ambiguous times, even when that one is daylight time.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from . import config

logger = logging.getLogger(__name__)


def resolve_time_zone(tz: tzinfo | str) -> tzinfo:
    """
    Return a tzinfo for `tz`.

    Args:
        tz: A tzinfo instance (returned unchanged) or an IANA key such as
            "America/New_York".

    Raises:
        zoneinfo.ZoneInfoNotFoundError: The key is not in the tz database.
        ValueError: The key is malformed (e.g. an absolute path).
        TypeError: `tz` is neither a tzinfo nor a string.
    """

    if isinstance(tz, tzinfo):
        return tz
    if isinstance(tz, str):
        return ZoneInfo(tz)
    raise TypeError(f"tz must be a tzinfo or an IANA key, got {type(tz).__name__}")


def get_time_zone(name: str | None = None) -> tzinfo:
    """Look up `name`, falling back to the configured default zone."""

    return resolve_time_zone(name if name is not None else config.DEFAULT_TIME_ZONE)


def local_to_utc(wall: datetime, tz: tzinfo | str) -> datetime:
    """
    Map a naive wall-clock value in `tz` to a UTC datetime.

    See the module docstring for how nonexistent and ambiguous wall times are
    resolved.
    """

    if wall.tzinfo is not None:
        raise ValueError("wall must be a naive wall-clock datetime")
    zone = resolve_time_zone(tz)

    earlier = wall.replace(tzinfo=zone, fold=0)
    later = wall.replace(tzinfo=zone, fold=1)
    offset_before = earlier.utcoffset()
    offset_after = later.utcoffset()

    if offset_before == offset_after:
        return earlier.astimezone(timezone.utc)

    if _round_trips(earlier, wall):
        chosen = _standard_occurrence(earlier, later)
        logger.debug("Ambiguous wall time %s in %s resolved to %s", wall, zone, chosen)
        return chosen.astimezone(timezone.utc)

    transition = _gap_transition(wall, zone, offset_before, offset_after)
    logger.debug("Nonexistent wall time %s in %s moved to %s", wall, zone, transition)
    return transition


def _round_trips(aware: datetime, wall: datetime) -> bool:
    back = aware.astimezone(timezone.utc).astimezone(aware.tzinfo)
    return back.replace(tzinfo=None) == wall


def _standard_occurrence(earlier: datetime, later: datetime) -> datetime:
    earlier_standard = earlier.dst() == timedelta(0)
    later_standard = later.dst() == timedelta(0)
    if later_standard and not earlier_standard:
        return later
    return earlier


def _gap_transition(
    wall: datetime,
    zone: tzinfo,
    offset_before: timedelta,
    offset_after: timedelta,
) -> datetime:
    """
    Find the UTC instant at which `zone` skips over `wall`.

    The transition lies in (wall - offset_after, wall - offset_before]. Zone
    transitions fall on whole seconds, so a bisection over seconds is exact.
    """

    low = (wall.replace(microsecond=0) - offset_after).replace(tzinfo=timezone.utc)
    high_seconds = int((offset_after - offset_before).total_seconds()) + 1
    low_seconds = 0
    while high_seconds - low_seconds > 1:
        middle = (low_seconds + high_seconds) // 2
        probe = low + timedelta(seconds=middle)
        if probe.astimezone(zone).utcoffset() == offset_after:
            high_seconds = middle
        else:
            low_seconds = middle
    return low + timedelta(seconds=high_seconds)
