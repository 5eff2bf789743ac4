#!/usr/bin/env python3
"""
Sun endpoints
Sunrise/sunset/twilight, solar noon and sun path
"""

from fastapi import APIRouter, Depends

from ...calc.facade import SwephInstance
from ...calc.monitoring import track_request
from ..deps import get_sweph
from ..models import (
    LocalDayRequest,
    SolarNoonResponse,
    SunPathPointResponse,
    SunPathRequest,
    SunTimesResponse,
)
from ..openapi import DEFAULT_ERROR_RESPONSES

router = APIRouter(prefix="/sun", tags=["sun"], responses=DEFAULT_ERROR_RESPONSES)


@router.post(
    "/times",
    response_model=SunTimesResponse,
    summary="Sun times",
    operation_id="sun_times",
)
async def sun_times(
    request: LocalDayRequest, sweph: SwephInstance = Depends(get_sweph)
) -> SunTimesResponse:
    """
    Sunrise, sunset, solar noon, day length and civil/nautical twilight.

    Fields are null for events that do not occur (polar day or night).
    """
    with track_request("sun_times"):
        times = sweph.calculate_sun_times(request.timestamp, request.location.to_geo())
        return SunTimesResponse(**times.to_dict())


@router.post(
    "/noon",
    response_model=SolarNoonResponse,
    summary="Solar noon",
    operation_id="sun_noon",
)
async def solar_noon(
    request: LocalDayRequest, sweph: SwephInstance = Depends(get_sweph)
) -> SolarNoonResponse:
    with track_request("sun_noon"):
        noon = sweph.calculate_solar_noon(request.timestamp, request.location.to_geo())
        return SolarNoonResponse(time=noon.time, altitude=noon.altitude)


@router.post(
    "/path",
    response_model=list[SunPathPointResponse],
    summary="Sun path",
    operation_id="sun_path",
)
async def sun_path(
    request: SunPathRequest, sweph: SwephInstance = Depends(get_sweph)
) -> list[SunPathPointResponse]:
    """Sun azimuth and apparent altitude sampled across the local day."""
    with track_request("sun_path"):
        points = sweph.calculate_sun_path(
            request.timestamp, request.location.to_geo(), request.interval_minutes
        )
        return [
            SunPathPointResponse(time=p.time, azimuth=p.azimuth, altitude=p.altitude)
            for p in points
        ]
