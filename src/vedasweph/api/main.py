#!/usr/bin/env python3
"""
vedasweph API - Main Application
FastAPI application exposing Swiss Ephemeris calculations over HTTP
"""

import os
import uuid

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel, Field

from .. import __version__
from ..calc.monitoring import setup_prometheus_metrics
from ..core.config import get_settings
from ..core.logging import get_api_logger, setup_logging
from ..errors import EngineError, EngineNotInitializedError, UnsupportedPlatformError
from ..interfaces.initialize import initialize_platforms
from .models import Problem
from .routers.ayanamsa import router as ayanamsa_router
from .routers.health import router as health_router
from .routers.moon import router as moon_router
from .routers.planets import router as planets_router
from .routers.sun import router as sun_router

API_PREFIX = "/api/v1"

# Initialize structured logging EARLY (before any logger usage)
_settings = get_settings()
setup_logging(
    level=_settings.log_level,
    format_json=_settings.log_format.lower() == "json",
)
logger = get_api_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info(f"Starting vedasweph API {__version__}...")
    setup_prometheus_metrics()
    platforms = initialize_platforms()
    if not any(platforms.values()):
        logger.warning("No engine platform could be registered")
    yield
    logger.info("vedasweph API stopped")


app = FastAPI(
    title="vedasweph API",
    description="Swiss Ephemeris calculations: planets, moon, sun times and ayanamsa",
    version=__version__,
    docs_url="/api/docs",
    servers=[{"url": os.getenv("OPENAPI_PUBLIC_URL", "/")}],
    lifespan=lifespan,
)

setup_prometheus_metrics()

app.include_router(health_router, prefix=API_PREFIX)
app.include_router(planets_router, prefix=API_PREFIX)
app.include_router(moon_router, prefix=API_PREFIX)
app.include_router(sun_router, prefix=API_PREFIX)
app.include_router(ayanamsa_router, prefix=API_PREFIX)


# Prometheus metrics endpoint
@app.get("/metrics", response_class=PlainTextResponse, tags=["health"])
async def metrics():
    """Prometheus metrics endpoint"""
    return PlainTextResponse(generate_latest(), media_type=CONTENT_TYPE_LATEST)


class RootInfoResponse(BaseModel):
    name: str
    version: str
    status: str
    docs: str
    platform: str = Field(..., description="Configured engine platform")


@app.get("/", response_model=RootInfoResponse, tags=["health"])
async def root() -> dict[str, object]:
    return {
        "name": "vedasweph API",
        "version": __version__,
        "status": "operational",
        "docs": "/api/docs",
        "platform": get_settings().platform,
    }


# ============================================================================
# PROBLEM DETAILS
# ============================================================================


def _problem_response(
    request: Request,
    status_code: int,
    title: str,
    detail: str | None = None,
    extensions: dict | None = None,
) -> JSONResponse:
    req_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    problem = Problem(
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url),
        extensions=extensions,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(),
        headers={"X-Request-ID": req_id},
    )


@app.exception_handler(EngineError)
async def engine_error_handler(request: Request, exc: EngineError):
    logger.warning(f"Engine error on {request.url.path}: {exc}")
    return _problem_response(
        request, 502, "Ephemeris engine error", str(exc), exc.to_dict()
    )


@app.exception_handler(EngineNotInitializedError)
@app.exception_handler(UnsupportedPlatformError)
async def engine_unavailable_handler(request: Request, exc: Exception):
    logger.error(f"Engine unavailable on {request.url.path}: {exc}")
    return _problem_response(request, 503, "Ephemeris engine unavailable", str(exc))


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    return _problem_response(request, 422, "Invalid request", str(exc))


# Global HTTPException handler emitting RFC7807 Problem Details
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    title = exc.detail if isinstance(exc.detail, str) else "HTTP error"
    return _problem_response(request, exc.status_code, title)


# Fallback handler for uncaught exceptions
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}")
    return _problem_response(request, 500, "Internal Server Error", str(exc)[:200])
