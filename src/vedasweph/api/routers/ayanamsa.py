#!/usr/bin/env python3
"""
Ayanamsa endpoint
"""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from ...calc.constants import AyanamsaType
from ...calc.facade import SwephInstance
from ...calc.monitoring import track_request
from ..deps import get_sweph
from ..models import AyanamsaResponse, ensure_utc
from ..openapi import DEFAULT_ERROR_RESPONSES

router = APIRouter(prefix="/ayanamsa", tags=["ayanamsa"], responses=DEFAULT_ERROR_RESPONSES)


@router.get(
    "",
    response_model=AyanamsaResponse,
    summary="Ayanamsa value",
    operation_id="ayanamsa_value",
)
async def get_ayanamsa(
    timestamp: datetime | None = Query(None, description="Instant (UTC); default now"),
    ayanamsa: int | None = Query(None, description="Ayanamsa code 0-20 (default: Lahiri)"),
    sweph: SwephInstance = Depends(get_sweph),
) -> AyanamsaResponse:
    if ayanamsa is not None and ayanamsa not in AyanamsaType._value2member_map_:
        raise HTTPException(status_code=422, detail=f"Unknown ayanamsa code {ayanamsa}")

    with track_request("ayanamsa"):
        when = ensure_utc(timestamp) if timestamp else datetime.now(UTC)
        mode = ayanamsa if ayanamsa is not None else sweph.settings.default_ayanamsa
        return AyanamsaResponse(
            value=sweph.get_ayanamsa(when, mode),
            ayanamsa=mode,
            julian_day=sweph.date_to_julian(when),
        )
