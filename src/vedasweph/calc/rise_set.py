#!/usr/bin/env python3
"""
Rise, set and meridian transit lookups
Thin delegation to the engine's rise_transit with uniform error handling
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING

from ..errors import EngineError
from ..interfaces.engine_adapter import EngineFailure
from .constants import (
    CALC_MTRANSIT,
    CALC_RISE,
    CALC_SET,
    EQUATORIAL_FLAGS,
    FLG_SWIEPH,
    BodyDef,
)
from .core_types import GeoLocation, RiseSetTransit
from .planet_pipeline import fetch_position
from .time_utils import date_to_internal, internal_to_date, local_midnight_utc

if TYPE_CHECKING:
    from ..interfaces.engine_adapter import EngineAdapter


def day_start_jd(engine: EngineAdapter, when: datetime, location: GeoLocation) -> float:
    """Julian day of local midnight for the location's day containing when"""
    return date_to_internal(engine, local_midnight_utc(when, location))


def find_event(
    engine: EngineAdapter,
    jd_ut: float,
    body: int,
    event: int,
    location: GeoLocation,
    *,
    pressure: float = 0.0,
    temperature: float = 0.0,
    target_name: str | None = None,
) -> float | None:
    """Julian day of the next event after jd_ut

    Returns:
        Event time, or None when the body never crosses the horizon
        (circumpolar) or the platform has no rise/transit support

    Raises:
        EngineError: The engine reported an error
    """
    if not engine.supports_rise_transit:
        return None

    result = engine.rise_transit(
        jd_ut, int(body), "", FLG_SWIEPH, event, location.geopos, pressure, temperature
    )
    if isinstance(result, EngineFailure):
        raise EngineError("rise_transit", target_name or result.target, result.message)
    return result.transit_time


def to_local(jd_ut: float | None, location: GeoLocation) -> datetime | None:
    if jd_ut is None:
        return None
    return internal_to_date(jd_ut, location.timezone)


def rise_set_transit(
    engine: EngineAdapter,
    body: int,
    when: datetime,
    location: GeoLocation,
    *,
    pressure: float = 0.0,
    temperature: float = 0.0,
    target_name: str | None = None,
) -> RiseSetTransit:
    """Rise, set and upper transit of a body on the location's local day

    Each search starts at local midnight; times are expressed in the
    location's UTC offset.
    """
    if not engine.supports_rise_transit:
        return RiseSetTransit()

    jd = day_start_jd(engine, when, location)
    kwargs = dict(pressure=pressure, temperature=temperature, target_name=target_name)
    return RiseSetTransit(
        rise=to_local(find_event(engine, jd, body, CALC_RISE, location, **kwargs), location),
        set=to_local(find_event(engine, jd, body, CALC_SET, location, **kwargs), location),
        transit=to_local(
            find_event(engine, jd, body, CALC_MTRANSIT, location, **kwargs), location
        ),
    )


def meridian_altitude(latitude: float, declination: float) -> float:
    """Altitude of a body on the upper meridian"""
    return 90.0 - abs(latitude - declination)


def with_transit_position(
    engine: EngineAdapter, body: BodyDef, events: RiseSetTransit, location: GeoLocation
) -> RiseSetTransit:
    """Add the body's meridian altitude and distance at its transit time

    Declination and distance come from an equatorial position at the
    transit instant. Without a transit both stay None.

    Raises:
        EngineError: The position lookup failed
    """
    if events.transit is None:
        return events

    jd = date_to_internal(engine, events.transit)
    position = fetch_position(engine, jd, body, EQUATORIAL_FLAGS)
    return replace(
        events,
        transit_altitude=meridian_altitude(location.latitude, position.latitude),
        transit_distance=position.distance,
    )
