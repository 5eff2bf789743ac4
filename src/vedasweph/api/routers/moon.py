#!/usr/bin/env python3
"""
Moon endpoints
Phase, illumination, age, distance and moonrise/moonset
"""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Query

from ...calc.facade import SwephInstance
from ...calc.monitoring import track_request
from ..deps import get_sweph
from ..models import (
    MoonDataRequest,
    MoonDataResponse,
    MoonPhaseResponse,
    NextMoonPhasesResponse,
    ensure_utc,
)
from ..openapi import DEFAULT_ERROR_RESPONSES

router = APIRouter(prefix="/moon", tags=["moon"], responses=DEFAULT_ERROR_RESPONSES)


@router.post(
    "/data",
    response_model=MoonDataResponse,
    summary="Moon data",
    operation_id="moon_data",
)
async def moon_data(
    request: MoonDataRequest, sweph: SwephInstance = Depends(get_sweph)
) -> MoonDataResponse:
    """
    Moon phase, illumination, age and distance, plus rise/set/transit.

    Without a location, events are computed for latitude/longitude (0, 0).
    """
    with track_request("moon_data"):
        location = request.location.to_geo() if request.location else None
        data = sweph.calculate_moon_data(request.timestamp, location)
        return MoonDataResponse(**data.to_dict())


@router.get(
    "/phase",
    response_model=MoonPhaseResponse,
    summary="Moon phase",
    operation_id="moon_phase",
)
async def moon_phase(
    timestamp: datetime | None = Query(None, description="Instant (UTC); default now"),
    sweph: SwephInstance = Depends(get_sweph),
) -> MoonPhaseResponse:
    with track_request("moon_phase"):
        when = ensure_utc(timestamp) if timestamp else datetime.now(UTC)
        return MoonPhaseResponse(**sweph.calculate_moon_phase(when).to_dict())


@router.get(
    "/next-phases",
    response_model=NextMoonPhasesResponse,
    summary="Next principal moon phases",
    operation_id="moon_next_phases",
)
async def next_moon_phases(
    timestamp: datetime | None = Query(None, description="Instant (UTC); default now"),
    sweph: SwephInstance = Depends(get_sweph),
) -> NextMoonPhasesResponse:
    """Approximate next new moon, first quarter, full moon and last quarter."""
    with track_request("moon_next_phases"):
        when = ensure_utc(timestamp) if timestamp else datetime.now(UTC)
        phases = sweph.calculate_next_moon_phases(when)
        return NextMoonPhasesResponse(
            new_moon=phases.new_moon,
            first_quarter=phases.first_quarter,
            full_moon=phases.full_moon,
            last_quarter=phases.last_quarter,
        )
