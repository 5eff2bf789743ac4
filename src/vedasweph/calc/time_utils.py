#!/usr/bin/env python3
"""
Time utilities for ephemeris calculations.

Calendar datetime <-> Julian day conversion and timezone helpers. The engine
owns the calendar algorithm for the forward direction; the reverse direction
is plain epoch arithmetic so it works on every platform.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from .constants import GREGORIAN_CALENDAR, JULIAN_UNIX_EPOCH

if TYPE_CHECKING:
    from ..interfaces.engine_adapter import EngineAdapter
    from .core_types import GeoLocation

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Ensure a datetime is timezone-aware and in UTC (naive means UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def fixed_offset(hours: float) -> timezone:
    """Fixed-offset tzinfo for a UTC offset in hours."""
    return timezone(timedelta(hours=hours))


def date_to_internal(engine: EngineAdapter, when: datetime) -> float:
    """Convert a datetime to the engine's Julian day (UT).

    Args:
        engine: Adapter providing time_to_internal
        when: Datetime; naive values are taken as UTC

    Returns:
        Julian day number
    """
    dt = ensure_utc(when)
    hour = (
        dt.hour
        + dt.minute / 60.0
        + dt.second / 3600.0
        + dt.microsecond / 3_600_000_000.0
    )
    return engine.time_to_internal(dt.year, dt.month, dt.day, hour, GREGORIAN_CALENDAR)


def internal_to_date(day_count: float, timezone_offset_hours: float = 0.0) -> datetime:
    """Convert a Julian day to an aware datetime.

    The result is expressed in the fixed offset given, so its wall clock is
    UTC shifted by timezone_offset_hours.

    Args:
        day_count: Julian day (UT)
        timezone_offset_hours: UTC offset of the returned datetime

    Returns:
        Aware datetime
    """
    utc = UNIX_EPOCH + timedelta(days=day_count - JULIAN_UNIX_EPOCH)
    if timezone_offset_hours:
        return utc.astimezone(fixed_offset(timezone_offset_hours))
    return utc


def local_midnight_utc(when: datetime, location: GeoLocation) -> datetime:
    """UTC instant of local midnight for the location's day containing when."""
    local = ensure_utc(when).astimezone(location.tzinfo)
    midnight = local.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight.astimezone(timezone.utc)
