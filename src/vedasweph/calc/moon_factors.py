#!/usr/bin/env python3
"""
Moon phase, illumination, age and distance

Combines two independent tropical position calls (Sun, Moon). Either call
failing aborts the computation; no partial phase data is returned.

Formulas:
    phase        = normalize(moon - sun)
    illumination = (1 - cos(phase)) / 2 * 100
    age          = phase / 360 * 29.53 days
    distance     = distance_au * 149 597 870.7 km
"""

from __future__ import annotations

import math

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from .angles_indices import get_moon_phase_name
from .constants import (
    AU_IN_KM,
    LUNAR_MONTH_DAYS,
    MOON,
    SUN,
    SYNODIC_MONTH_APPROX,
    TROPICAL_FLAGS,
    PlanetId,
)
from .core_types import NEUTRAL_LOCATION, GeoLocation, MoonData, MoonPhase, NextMoonPhases
from .numerics import normalize_longitude
from .planet_pipeline import fetch_position
from .rise_set import rise_set_transit
from .time_utils import date_to_internal, ensure_utc

if TYPE_CHECKING:
    from ..interfaces.engine_adapter import EngineAdapter

# Target elongations for the principal phases
PRINCIPAL_PHASES = (
    ("new_moon", 0.0),
    ("first_quarter", 90.0),
    ("full_moon", 180.0),
    ("last_quarter", 270.0),
)


def illumination_from_phase(phase: float) -> float:
    """Illuminated fraction of the disc, in percent"""
    return (1.0 - math.cos(math.radians(phase))) / 2.0 * 100.0


def age_from_phase(phase: float) -> float:
    """Days since new moon under a mean synodic month"""
    return phase / 360.0 * SYNODIC_MONTH_APPROX


def calculate_moon_data(
    engine: EngineAdapter,
    when: datetime,
    location: GeoLocation | None = None,
    *,
    pressure: float = 0.0,
    temperature: float = 0.0,
) -> MoonData:
    """Moon phase and distance at ``when``, plus rise/set/transit for the day

    Args:
        engine: Engine adapter
        when: Instant (naive = UTC)
        location: Observer; defaults to (0, 0) for location-free use

    Raises:
        EngineError: Sun, Moon or rise/transit call failed
    """
    location = location or NEUTRAL_LOCATION
    jd = date_to_internal(engine, when)

    sun = fetch_position(engine, jd, SUN, TROPICAL_FLAGS)
    moon = fetch_position(engine, jd, MOON, TROPICAL_FLAGS)

    phase = normalize_longitude(moon.longitude - sun.longitude)
    events = rise_set_transit(
        engine,
        PlanetId.MOON,
        when,
        location,
        pressure=pressure,
        temperature=temperature,
        target_name=MOON.name,
    )

    return MoonData(
        phase=phase,
        illumination=illumination_from_phase(phase),
        age=age_from_phase(phase),
        phase_name=get_moon_phase_name(phase),
        distance=moon.distance * AU_IN_KM,
        moonrise=events.rise,
        moonset=events.set,
        transit=events.transit,
    )


def calculate_moon_phase(engine: EngineAdapter, when: datetime) -> MoonPhase:
    """Location-independent projection of calculate_moon_data"""
    return calculate_moon_data(engine, when, NEUTRAL_LOCATION).to_phase()


def calculate_next_moon_phases(engine: EngineAdapter, when: datetime) -> NextMoonPhases:
    """Approximate next new/first-quarter/full/last-quarter instants

    Linear extrapolation at the mean synodic rate from the current phase.
    """
    start = ensure_utc(when)
    current = calculate_moon_phase(engine, start).phase
    degrees_per_day = 360.0 / LUNAR_MONTH_DAYS

    dates = {}
    for name, target in PRINCIPAL_PHASES:
        delta = target - current
        if delta <= 0:
            delta += 360.0
        dates[name] = start + timedelta(days=delta / degrees_per_day)

    return NextMoonPhases(**dates)
