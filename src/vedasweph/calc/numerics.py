#!/usr/bin/env python3
"""
Numerical helpers used across calc modules.

Angle normalization and degree/minute/second formatting.
"""

from __future__ import annotations

from math import floor


def normalize_longitude(deg: float) -> float:
    """Normalize an angle in degrees to [0, 360).

    Negative inputs wrap upward (-10 -> 350).
    """
    x = float(deg) % 360.0
    # float % can round up to exactly 360.0 for tiny negative inputs
    return 0.0 if x >= 360.0 else x


normalize_angle = normalize_longitude


def normalize_signed(deg: float) -> float:
    """Map an angle into (-180, 180]."""
    x = normalize_longitude(deg)
    return x - 360.0 if x > 180.0 else x


def clamp_value(v: float, lo: float, hi: float) -> float:
    """Clamp a value into [lo, hi]."""
    if v < lo:
        return lo
    if v > hi:
        return hi
    return v


def degrees_to_dms(deg: float) -> tuple[int, int, int]:
    """Split decimal degrees into (degrees, minutes, seconds).

    The sign is carried on the degrees component only; minutes and seconds
    are always non-negative. Seconds are rounded and carried upward.

    Example: -15.5125 -> (-15, 30, 45)
    """
    value = float(deg)
    negative = value < 0
    value = abs(value)

    whole_deg = int(floor(value))
    minutes_full = (value - whole_deg) * 60.0
    whole_min = int(floor(minutes_full))
    seconds = int(round((minutes_full - whole_min) * 60.0))

    if seconds == 60:
        seconds = 0
        whole_min += 1
    if whole_min == 60:
        whole_min = 0
        whole_deg += 1

    return (-whole_deg if negative else whole_deg), whole_min, seconds


def format_dms(deg: float) -> str:
    """Format degrees as D°M'S\"."""
    d, m, s = degrees_to_dms(deg)
    return f"{d}°{m}'{s}\""
