#!/usr/bin/env python3
"""
Planet-list pipeline

Drives the engine across an ordered body list under one reference frame and
derives rashi, nakshatra and retrograde attributes for each body. Shadow
bodies (Ketu) are never sent to the engine; they are synthesized as the
antipode of their source in a second pass, so list order does not matter.
A single engine failure aborts the whole batch.
"""

from __future__ import annotations

import logging

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..errors import EngineError
from ..interfaces.engine_adapter import EngineFailure, RawPosition
from .angles_indices import get_nakshatra, get_rashi, get_rashi_degree, is_retrograde
from .constants import (
    BODIES_BY_ID,
    FLG_SPEED,
    KETU,
    OUTER_PLANETS,
    PLANET_FLAGS,
    VEDIC_PLANET_ORDER,
    BodyDef,
)
from .core_types import Planet, ReferenceFrame
from .numerics import normalize_longitude

if TYPE_CHECKING:
    from ..interfaces.engine_adapter import EngineAdapter

logger = logging.getLogger(__name__)


def select_bodies(include_outer: bool = False) -> tuple[BodyDef, ...]:
    """Primary Vedic list, optionally followed by the outer planets"""
    if include_outer:
        return VEDIC_PLANET_ORDER + OUTER_PLANETS
    return VEDIC_PLANET_ORDER


def antipode(source: RawPosition) -> RawPosition:
    """Shadow position: opposite longitude, mirrored latitude, same motion"""
    return RawPosition(
        longitude=normalize_longitude(source.longitude + 180.0),
        latitude=-source.latitude,
        distance=source.distance,
        longitude_speed=source.longitude_speed,
        latitude_speed=source.latitude_speed,
        distance_speed=source.distance_speed,
    )


def derive_planet(body: BodyDef, raw: RawPosition) -> Planet:
    """Build the domain Planet from a raw (or synthesized) engine position"""
    longitude = normalize_longitude(raw.longitude)
    nakshatra = get_nakshatra(longitude)
    return Planet(
        id=body.slug,
        name=body.name,
        longitude=longitude,
        latitude=raw.latitude,
        distance=raw.distance,
        speed=raw.longitude_speed,
        rashi=get_rashi(longitude),
        rashi_degree=get_rashi_degree(longitude),
        nakshatra=nakshatra.number,
        pada=nakshatra.pada,
        is_retrograde=is_retrograde(raw.longitude_speed),
        total_degree=raw.longitude,
    )


def fetch_position(
    engine: EngineAdapter, jd_ut: float, body: BodyDef, flags: int
) -> RawPosition:
    """One engine call; EngineFailure is raised as EngineError naming the body"""
    result = engine.calc_position(jd_ut, int(body.id), flags)
    if isinstance(result, EngineFailure):
        raise EngineError("calc_position", body.name, result.message)
    return result


def calculate_planets(
    engine: EngineAdapter,
    jd_ut: float,
    bodies: Sequence[BodyDef],
    frame: ReferenceFrame,
    *,
    include_speed: bool = True,
) -> list[Planet]:
    """Calculate an ordered list of planets under one reference frame

    Args:
        engine: Engine adapter
        jd_ut: Julian day (UT), shared by every body in the call
        bodies: Ordered body list; shadow entries are synthesized
        frame: Sidereal frame, applied before any position call
        include_speed: Request speeds from the engine

    Returns:
        Planets in the order of ``bodies``; a shadow whose source is not in
        the list is omitted

    Raises:
        EngineError: On the first engine failure (no partial list)
    """
    flags = PLANET_FLAGS | (FLG_SPEED if include_speed else 0)

    frame.apply(engine)

    # Pass 1: real bodies
    raw: dict[int, RawPosition] = {}
    for body in bodies:
        if not body.is_shadow:
            raw[body.id] = fetch_position(engine, jd_ut, body, flags)

    # Pass 2: shadows, in input order
    planets: list[Planet] = []
    for body in bodies:
        if body.is_shadow:
            source = raw.get(body.shadow_of)
            if source is None:
                logger.debug(f"Omitting {body.name}: source body not computed")
                continue
            planets.append(derive_planet(body, antipode(source)))
        else:
            planets.append(derive_planet(body, raw[body.id]))

    return planets


def calculate_planet(
    engine: EngineAdapter, jd_ut: float, body_id: int, frame: ReferenceFrame
) -> Planet:
    """Calculate a single planet by engine id (-1 for Ketu)

    Raises:
        ValueError: Unknown body id
        EngineError: Engine failure
    """
    body = BODIES_BY_ID.get(body_id)
    if body is None:
        raise ValueError(f"Unknown body id: {body_id}")

    if body.is_shadow:
        source = BODIES_BY_ID[body.shadow_of]
        return calculate_planets(engine, jd_ut, (source, KETU), frame)[1]
    return calculate_planets(engine, jd_ut, (body,), frame)[0]
