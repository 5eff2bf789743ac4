#!/usr/bin/env python3
"""
Sunrise, sunset, twilight, solar noon and sun path for a local day
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from .constants import (
    BIT_CIVIL_TWILIGHT,
    BIT_NAUTIC_TWILIGHT,
    CALC_RISE,
    CALC_SET,
    EQU2HOR,
    EQUATORIAL_FLAGS,
    SUN,
    PlanetId,
)
from .core_types import GeoLocation, SolarNoon, SunPathPoint, SunTimes
from .planet_pipeline import fetch_position
from .rise_set import day_start_jd, find_event, meridian_altitude, to_local
from .time_utils import date_to_internal, local_midnight_utc

if TYPE_CHECKING:
    from ..interfaces.engine_adapter import EngineAdapter


def calculate_sun_times(
    engine: EngineAdapter,
    when: datetime,
    location: GeoLocation,
    *,
    pressure: float = 0.0,
    temperature: float = 0.0,
) -> SunTimes:
    """Sun events for the location's local day containing ``when``

    Solar noon is the sunrise/sunset midpoint. Any event the engine reports
    as absent (polar day/night) is None, as is everything on platforms
    without rise/transit support.

    Raises:
        EngineError: The engine reported an error
    """
    if not engine.supports_rise_transit:
        return SunTimes()

    jd = day_start_jd(engine, when, location)

    def event(flag: int) -> datetime | None:
        jd_event = find_event(
            engine,
            jd,
            PlanetId.SUN,
            flag,
            location,
            pressure=pressure,
            temperature=temperature,
            target_name=SUN.name,
        )
        return to_local(jd_event, location)

    sunrise = event(CALC_RISE)
    sunset = event(CALC_SET)

    solar_noon = None
    day_length = None
    if sunrise is not None and sunset is not None:
        span = sunset - sunrise
        solar_noon = sunrise + span / 2
        day_length = span.total_seconds() / 3600.0

    return SunTimes(
        sunrise=sunrise,
        sunset=sunset,
        solar_noon=solar_noon,
        day_length=day_length,
        civil_twilight_start=event(CALC_RISE | BIT_CIVIL_TWILIGHT),
        civil_twilight_end=event(CALC_SET | BIT_CIVIL_TWILIGHT),
        nautical_twilight_start=event(CALC_RISE | BIT_NAUTIC_TWILIGHT),
        nautical_twilight_end=event(CALC_SET | BIT_NAUTIC_TWILIGHT),
    )


def calculate_solar_noon(
    engine: EngineAdapter,
    when: datetime,
    location: GeoLocation,
    *,
    pressure: float = 0.0,
    temperature: float = 0.0,
) -> SolarNoon:
    """Solar noon and the Sun's meridian altitude

    altitude = max(0, 90 - |latitude - declination|)
    """
    times = calculate_sun_times(
        engine, when, location, pressure=pressure, temperature=temperature
    )
    if times.solar_noon is None:
        return SolarNoon(time=None, altitude=None)

    jd = date_to_internal(engine, times.solar_noon)
    declination = fetch_position(engine, jd, SUN, EQUATORIAL_FLAGS).latitude
    altitude = meridian_altitude(location.latitude, declination)
    return SolarNoon(time=times.solar_noon, altitude=max(0.0, altitude))


def calculate_sun_path(
    engine: EngineAdapter,
    when: datetime,
    location: GeoLocation,
    interval_minutes: int = 30,
    *,
    pressure: float = 0.0,
    temperature: float = 0.0,
) -> list[SunPathPoint]:
    """Sun azimuth/altitude sampled across the local day

    Azimuth is returned as the engine reports it. Platforms without
    horizontal-coordinate support yield an empty path.
    """
    if interval_minutes <= 0:
        raise ValueError("interval_minutes must be positive")
    if not engine.supports_horizontal:
        return []

    start = local_midnight_utc(when, location)
    step = timedelta(minutes=interval_minutes)
    samples = (24 * 60) // interval_minutes + 1

    path: list[SunPathPoint] = []
    for i in range(samples):
        t = start + step * i
        jd = date_to_internal(engine, t)
        sun = fetch_position(engine, jd, SUN, EQUATORIAL_FLAGS)
        horizontal = engine.az_alt(
            jd,
            EQU2HOR,
            location.geopos,
            pressure,
            temperature,
            (sun.longitude, sun.latitude, sun.distance),
        )
        path.append(
            SunPathPoint(
                time=t.astimezone(location.tzinfo),
                azimuth=horizontal.azimuth,
                altitude=horizontal.altitude,
            )
        )
    return path
