#!/usr/bin/env python3
"""
vedasweph - unified Swiss Ephemeris calculation API

Planet positions, moon data, sun times and ayanamsa for Vedic astrology on
top of interchangeable ephemeris engines.

Usage:
    sweph = await create_sweph()
    planets = sweph.calculate_planets(datetime.now(timezone.utc))
"""

from .calc.constants import AyanamsaType, PlanetId
from .calc.core_types import (
    CalculationOptions,
    GeoLocation,
    MoonData,
    MoonPhase,
    NextMoonPhases,
    Planet,
    ReferenceFrame,
    RiseSetTransit,
    SolarNoon,
    SunPathPoint,
    SunTimes,
)
from .calc.facade import SwephInstance, create_sweph, with_sweph_instance
from .core.config import SwephSettings
from .errors import (
    EngineError,
    EngineNotInitializedError,
    SwephError,
    UnsupportedPlatformError,
)

__version__ = "0.3.0"

__all__ = [
    "AyanamsaType",
    "CalculationOptions",
    "EngineError",
    "EngineNotInitializedError",
    "GeoLocation",
    "MoonData",
    "MoonPhase",
    "NextMoonPhases",
    "Planet",
    "PlanetId",
    "ReferenceFrame",
    "RiseSetTransit",
    "SolarNoon",
    "SunPathPoint",
    "SunTimes",
    "SwephError",
    "SwephInstance",
    "SwephSettings",
    "UnsupportedPlatformError",
    "create_sweph",
    "with_sweph_instance",
]
