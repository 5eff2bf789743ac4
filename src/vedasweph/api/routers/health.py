#!/usr/bin/env python3
"""
Health check endpoints for monitoring and readiness
"""

import os

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ...calc.facade import SwephInstance
from ...calc.monitoring import get_metrics
from ...errors import SwephError
from ...interfaces.initialize import get_platform_status
from ..deps import get_sweph
from ..models import HealthStatus

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "/live",
    response_model=HealthStatus,
    summary="Liveness",
    operation_id="health_live",
)
async def liveness_check() -> HealthStatus:
    """
    Liveness probe endpoint.

    Returns 200 OK while the process is responsive. Does not touch the engine.
    """
    return HealthStatus(
        status="ok",
        timestamp=datetime.now(UTC),
        details={"process_id": os.getpid()},
    )


@router.get(
    "/ready",
    response_model=HealthStatus,
    summary="Readiness",
    operation_id="health_ready",
    responses={503: {"description": "Engine not ready"}},
)
async def readiness_check(sweph: SwephInstance = Depends(get_sweph)):
    """
    Readiness probe endpoint.

    Runs a moon phase calculation for the current instant; a failing
    engine answers 503 with the failure in ``details``.
    """
    now = datetime.now(UTC)
    details = {
        "version": sweph.version,
        "platforms": get_platform_status(),
        "computations": get_metrics()["metrics"],
    }

    try:
        phase = sweph.calculate_moon_phase(now)
        details["moon_phase"] = round(phase.phase, 2)
    except SwephError as e:
        details["error"] = str(e)
        body = HealthStatus(
            status="error", timestamp=now, platform=sweph.platform, details=details
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(mode="json"),
        )

    return HealthStatus(status="ok", timestamp=now, platform=sweph.platform, details=details)
