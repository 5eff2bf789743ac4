#!/usr/bin/env python3
"""
Angle and index calculations for rashis, nakshatras, padas and moon phases
Pure functions of a longitude/speed/phase angle; no engine access
"""

from dataclasses import dataclass
from math import floor

from .constants import (
    MOON_PHASES,
    NAKSHATRA_LORDS,
    NAKSHATRA_NAMES,
    SIGN_NAMES,
    SIGN_SPAN,
)
from .numerics import format_dms, normalize_longitude

# ============================================================================
# RASHI (ZODIAC SIGN) CALCULATIONS
# ============================================================================


def get_rashi(longitude: float) -> int:
    """Get rashi number (1-12) from longitude

    Args:
        longitude: Ecliptic longitude in degrees

    Returns:
        Rashi number (1=Aries, 12=Pisces)
    """
    return int(floor(normalize_longitude(longitude) / SIGN_SPAN)) + 1


def get_rashi_degree(longitude: float) -> float:
    """Get degrees within current rashi, in [0, 30)"""
    return normalize_longitude(longitude) % SIGN_SPAN


def rashi_name(longitude: float) -> str:
    """Get rashi name from longitude (e.g. "Aries")"""
    return SIGN_NAMES[get_rashi(longitude)]


def format_longitude(longitude: float) -> str:
    """Format a longitude as sign-degree DMS plus sign name

    Example: 15.5125 -> 15°30'45" Aries
    """
    # Round to whole arc-seconds first so 29.99999 reads as 0° of the next sign
    rounded = normalize_longitude(round(normalize_longitude(longitude) * 3600.0) / 3600.0)
    return f"{format_dms(get_rashi_degree(rounded))} {rashi_name(rounded)}"


# ============================================================================
# NAKSHATRA CALCULATIONS
# ============================================================================


@dataclass(frozen=True)
class NakshatraPosition:
    """Lunar mansion number (1-27) and pada (1-4)"""

    number: int
    pada: int

    @property
    def name(self) -> str:
        return NAKSHATRA_NAMES[self.number]

    @property
    def lord(self) -> str:
        return NAKSHATRA_LORDS[self.number]


def get_nakshatra(longitude: float) -> NakshatraPosition:
    """Find nakshatra number (1-27) and pada (1-4)

    Works in pada units (108 per circle) so that exact boundaries such as
    180° land on the pada they open rather than the one they close.

    Args:
        longitude: Ecliptic longitude in degrees

    Returns:
        NakshatraPosition
    """
    padas = normalize_longitude(longitude) * 108.0 / 360.0
    pada_idx = min(int(floor(padas)), 107)
    return NakshatraPosition(number=pada_idx // 4 + 1, pada=pada_idx % 4 + 1)


def nakshatra_name(longitude: float) -> str:
    """Get nakshatra name from longitude (e.g. "Ashwini")"""
    return get_nakshatra(longitude).name


def nakshatra_lord(longitude: float) -> str:
    """Get the Vimshottari lord of the nakshatra at longitude"""
    return get_nakshatra(longitude).lord


# ============================================================================
# MOTION & PHASE
# ============================================================================


def is_retrograde(speed: float) -> bool:
    """True if longitude speed is negative"""
    return speed < 0


def get_moon_phase_name(angle: float) -> str:
    """Name one of 8 phase buckets centred on 0, 45, ..., 315 degrees

    Args:
        angle: Sun-to-Moon elongation in degrees

    Returns:
        Phase name ("New Moon" ... "Waning Crescent")
    """
    bucket = int(floor((normalize_longitude(angle) + 22.5) / 45.0)) % 8
    return MOON_PHASES[bucket]


# ============================================================================
# HOUSES
# ============================================================================


def get_house_position(longitude: float, cusps: list[float]) -> int:
    """Determine which house (1-12) a longitude falls in

    Args:
        longitude: Sidereal longitude in degrees
        cusps: The 12 house cusp longitudes, house 1 first

    Returns:
        House number (1-12); 1 if no interval matches
    """
    if len(cusps) != 12:
        raise ValueError(f"Expected 12 house cusps, got {len(cusps)}")

    lon = normalize_longitude(longitude)
    for i in range(12):
        start = normalize_longitude(cusps[i])
        end = normalize_longitude(cusps[(i + 1) % 12])
        if start > end:
            # House spans 0°
            if lon >= start or lon < end:
                return i + 1
        elif start <= lon < end:
            return i + 1
    return 1
