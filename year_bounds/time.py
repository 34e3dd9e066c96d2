"""
Timestamp validation helpers (pure).

Centralized checks shared by every boundary function.

Behavior and error messages must remain consistent across the package.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

# Smallest step representable by `datetime`.
TICK = timedelta(microseconds=1)


def require_aware_timestamp(name: str, value: datetime) -> None:
    """
    Enforces that a timestamp is an absolute instant.

    Invariants:
    - Timestamps must be timezone-aware.
    """

    if not isinstance(value, datetime):
        raise TypeError(f"{name} must be a datetime, got {type(value).__name__}")
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware")


def to_fixed_offset(value: datetime) -> datetime:
    """Rebind `value` to a fixed `timezone` carrying its current UTC offset."""

    require_aware_timestamp("value", value)
    return value.replace(tzinfo=timezone(value.utcoffset()))
