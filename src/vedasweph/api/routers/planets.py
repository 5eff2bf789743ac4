#!/usr/bin/env python3
"""
Planet endpoints
Sidereal planet list, single planet and rise/set/transit
"""

from fastapi import APIRouter, Depends, Path

from ...calc.core_types import CalculationOptions
from ...calc.facade import SwephInstance
from ...calc.monitoring import track_request
from ..deps import get_sweph
from ..models import (
    LocalDayRequest,
    PlanetRequest,
    PlanetResponse,
    PlanetsRequest,
    PlanetsResponse,
    RiseSetResponse,
    validate_body_id,
)
from ..openapi import DEFAULT_ERROR_RESPONSES

router = APIRouter(prefix="/planets", tags=["planets"], responses=DEFAULT_ERROR_RESPONSES)


def _body_id(body_id: int = Path(..., description="Engine body id (-1 = Ketu)")) -> int:
    return validate_body_id(body_id)


@router.post(
    "",
    response_model=PlanetsResponse,
    summary="Planet positions",
    operation_id="planets_list",
)
async def calculate_planets(
    request: PlanetsRequest, sweph: SwephInstance = Depends(get_sweph)
) -> PlanetsResponse:
    """
    Sidereal positions of the nine Vedic grahas in traditional order.

    Ketu is synthesized opposite Rahu. Outer planets are appended when
    requested. A failure on any single body fails the whole request.
    """
    with track_request("planets"):
        options = request.to_options()
        planets = sweph.calculate_planets(request.timestamp, options)
        ayanamsa = (
            options.ayanamsa
            if options.ayanamsa is not None
            else sweph.settings.default_ayanamsa
        )
        return PlanetsResponse(
            timestamp=request.timestamp,
            ayanamsa=ayanamsa,
            planets=[PlanetResponse(**p.to_dict()) for p in planets],
        )


@router.post(
    "/{body_id}",
    response_model=PlanetResponse,
    summary="Single planet position",
    operation_id="planets_single",
)
async def calculate_planet(
    request: PlanetRequest,
    body_id: int = Depends(_body_id),
    sweph: SwephInstance = Depends(get_sweph),
) -> PlanetResponse:
    with track_request("planet"):
        planet = sweph.calculate_planet(
            body_id, request.timestamp, CalculationOptions(ayanamsa=request.ayanamsa)
        )
        return PlanetResponse(**planet.to_dict())


@router.post(
    "/{body_id}/rise-set",
    response_model=RiseSetResponse,
    summary="Planet rise, set and transit",
    operation_id="planets_rise_set",
)
async def calculate_rise_set(
    request: LocalDayRequest,
    body_id: int = Depends(_body_id),
    sweph: SwephInstance = Depends(get_sweph),
) -> RiseSetResponse:
    """
    Rise, set and upper meridian transit on the observer's local day.

    Times are null when the body does not cross the horizon or the engine
    platform has no rise/transit support. The transit fields carry the
    meridian altitude (degrees) and distance (AU) at the transit instant.
    """
    with track_request("rise_set"):
        result = sweph.calculate_planet_rise_set_times(
            body_id, request.timestamp, request.location.to_geo()
        )
        return RiseSetResponse(
            rise=result.rise,
            set=result.set,
            transit=result.transit,
            transit_altitude=result.transit_altitude,
            transit_distance=result.transit_distance,
        )
