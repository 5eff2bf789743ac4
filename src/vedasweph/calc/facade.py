#!/usr/bin/env python3
"""
Unified instance facade
No domain logic, just orchestration over the pipeline, moon and sun modules

Every mode-dependent sequence (set sidereal mode, then query) runs under the
engine lock so concurrent callers cannot interleave reference frames.
"""

import asyncio
import logging

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from ..core.config import SwephSettings, get_settings
from ..errors import EngineNotInitializedError, SwephError
from ..interfaces.engine_adapter import EngineAdapter
from ..interfaces.initialize import initialize_platforms
from ..interfaces.registry import get_adapter
from . import moon_factors, planet_pipeline, sun_times
from .constants import BODIES_BY_ID
from .core_types import (
    CalculationOptions,
    GeoLocation,
    MoonData,
    MoonPhase,
    NextMoonPhases,
    Planet,
    ReferenceFrame,
    RiseSetTransit,
    SolarNoon,
    SunPathPoint,
    SunTimes,
)
from .monitoring import track_computation
from .rise_set import rise_set_transit, with_transit_position
from .time_utils import date_to_internal, internal_to_date

logger = logging.getLogger(__name__)

# ============================================================================
# INSTANCE
# ============================================================================


class SwephInstance:
    """Platform-independent calculation API over one engine adapter"""

    def __init__(self, engine: EngineAdapter, settings: SwephSettings | None = None):
        self._engine = engine
        self._settings = settings or get_settings()

    @property
    def engine(self) -> EngineAdapter:
        return self._engine

    @property
    def settings(self) -> SwephSettings:
        return self._settings

    @property
    def platform(self) -> str:
        return self._engine.platform

    @property
    def version(self) -> str:
        return self._engine.version()

    # ------------------------------------------------------------------
    # Option resolution
    # ------------------------------------------------------------------

    def _check_ready(self):
        if not self._engine.initialized:
            raise EngineNotInitializedError(
                f"Engine '{self.platform}' used before initialization; use create_sweph()"
            )

    def _frame(self, ayanamsa: int | None) -> ReferenceFrame:
        # Omitted ayanamsa resets to the configured default, never the previous mode
        if ayanamsa is None:
            ayanamsa = self._settings.default_ayanamsa
        return ReferenceFrame(ayanamsa=int(ayanamsa))

    @property
    def _atmosphere(self) -> dict[str, float]:
        return {
            "pressure": self._settings.atmospheric_pressure,
            "temperature": self._settings.atmospheric_temperature,
        }

    # ------------------------------------------------------------------
    # Planets
    # ------------------------------------------------------------------

    def calculate_planets(
        self, when: datetime, options: CalculationOptions | None = None
    ) -> list[Planet]:
        """Sidereal positions of the Vedic grahas (plus outer planets if asked)

        Args:
            when: Instant (naive = UTC)
            options: Ayanamsa and body-list selection

        Returns:
            Planets in Vedic order, Ketu synthesized from Rahu

        Raises:
            EngineError: Any single body failed
        """
        self._check_ready()
        options = options or CalculationOptions()
        include_outer = (
            options.include_outer_planets or self._settings.include_outer_planets
        )
        bodies = planet_pipeline.select_bodies(include_outer)
        frame = self._frame(options.ayanamsa)

        with track_computation("planets"), self._engine.lock:
            jd = date_to_internal(self._engine, when)
            return planet_pipeline.calculate_planets(self._engine, jd, bodies, frame)

    def calculate_planet(
        self, body_id: int, when: datetime, options: CalculationOptions | None = None
    ) -> Planet:
        """Single planet by engine id (-1 for Ketu)"""
        self._check_ready()
        options = options or CalculationOptions()
        frame = self._frame(options.ayanamsa)

        with track_computation("planet"), self._engine.lock:
            jd = date_to_internal(self._engine, when)
            return planet_pipeline.calculate_planet(self._engine, jd, body_id, frame)

    def calculate_planet_rise_set_times(
        self, body_id: int, when: datetime, location: GeoLocation
    ) -> RiseSetTransit:
        """Rise, set and transit of a body on the location's local day"""
        self._check_ready()
        body = BODIES_BY_ID.get(body_id)
        if body is None or body.is_shadow:
            raise ValueError(f"Rise/set not available for body id {body_id}")

        with track_computation("rise_set"), self._engine.lock:
            events = rise_set_transit(
                self._engine,
                body.id,
                when,
                location,
                target_name=body.name,
                **self._atmosphere,
            )
            return with_transit_position(self._engine, body, events, location)

    # ------------------------------------------------------------------
    # Sun
    # ------------------------------------------------------------------

    def calculate_sun_times(self, when: datetime, location: GeoLocation) -> SunTimes:
        self._check_ready()
        with track_computation("sun_times"), self._engine.lock:
            return sun_times.calculate_sun_times(
                self._engine, when, location, **self._atmosphere
            )

    def calculate_solar_noon(self, when: datetime, location: GeoLocation) -> SolarNoon:
        self._check_ready()
        with track_computation("solar_noon"), self._engine.lock:
            return sun_times.calculate_solar_noon(
                self._engine, when, location, **self._atmosphere
            )

    def calculate_sun_path(
        self,
        when: datetime,
        location: GeoLocation,
        interval_minutes: int | None = None,
    ) -> list[SunPathPoint]:
        self._check_ready()
        interval = interval_minutes or self._settings.sun_path_interval_minutes
        with track_computation("sun_path"), self._engine.lock:
            return sun_times.calculate_sun_path(
                self._engine, when, location, interval, **self._atmosphere
            )

    # ------------------------------------------------------------------
    # Moon
    # ------------------------------------------------------------------

    def calculate_moon_data(
        self, when: datetime, location: GeoLocation | None = None
    ) -> MoonData:
        """Phase, illumination, age, distance and local rise/set/transit

        Raises:
            EngineError: Sun or Moon position failed (no partial data)
        """
        self._check_ready()
        with track_computation("moon_data"), self._engine.lock:
            return moon_factors.calculate_moon_data(
                self._engine, when, location, **self._atmosphere
            )

    def calculate_moon_phase(self, when: datetime) -> MoonPhase:
        self._check_ready()
        with track_computation("moon_phase"), self._engine.lock:
            return moon_factors.calculate_moon_phase(self._engine, when)

    def calculate_next_moon_phases(self, when: datetime) -> NextMoonPhases:
        self._check_ready()
        with track_computation("next_moon_phases"), self._engine.lock:
            return moon_factors.calculate_next_moon_phases(self._engine, when)

    # ------------------------------------------------------------------
    # Ayanamsa & time
    # ------------------------------------------------------------------

    def get_ayanamsa(self, when: datetime, ayanamsa: int | None = None) -> float:
        """Ayanamsa value in degrees

        Sets the engine's sidereal mode first, so this is not side-effect free.
        """
        self._check_ready()
        frame = self._frame(ayanamsa)
        with self._engine.lock:
            frame.apply(self._engine)
            return self._engine.get_ayanamsa_ut(date_to_internal(self._engine, when))

    def date_to_julian(self, when: datetime) -> float:
        return date_to_internal(self._engine, when)

    def julian_to_date(self, jd: float, timezone_offset_hours: float = 0.0) -> datetime:
        return internal_to_date(jd, timezone_offset_hours)

    def set_ephe_path(self, path: str | None) -> None:
        with self._engine.lock:
            self._engine.set_ephemeris_path(path)

    def get_metadata(self) -> dict:
        return {
            "platform": self.platform,
            "version": self.version,
            "default_ayanamsa": self._settings.default_ayanamsa,
            "engine": self._engine.get_metadata(),
        }


# ============================================================================
# CREATION
# ============================================================================

_instances: dict[str, SwephInstance] = {}
_create_lock = asyncio.Lock()


async def create_sweph(
    settings: SwephSettings | None = None,
    *,
    platform: str | None = None,
    engine: EngineAdapter | None = None,
) -> SwephInstance:
    """Create a facade over an initialized engine

    The engine is initialized once; repeat calls reuse that state.

    Args:
        settings: Settings (default: from environment)
        platform: Registered platform name (default: settings.platform)
        engine: Explicit adapter, bypassing the registry

    Returns:
        SwephInstance ready for calculations
    """
    settings = settings or get_settings()

    if engine is None:
        initialize_platforms()
        engine = get_adapter(platform or settings.platform)

    await engine.initialize(settings.ephe_path)
    instance = SwephInstance(engine, settings)

    if settings.pre_warm:
        try:
            instance.calculate_planets(datetime.now(timezone.utc))
            logger.info(f"Pre-warmed {engine.platform} engine")
        except SwephError as e:
            logger.warning(f"Pre-warm failed on {engine.platform}: {e}")

    return instance


async def get_shared_instance(settings: SwephSettings | None = None) -> SwephInstance:
    """Process-wide instance per platform, created on first use"""
    settings = settings or get_settings()
    async with _create_lock:
        instance = _instances.get(settings.platform)
        if instance is None:
            instance = await create_sweph(settings)
            _instances[settings.platform] = instance
        return instance


@asynccontextmanager
async def with_sweph_instance(settings: SwephSettings | None = None):
    """Borrow the shared instance for a block

    Usage:
        async with with_sweph_instance() as sweph:
            planets = sweph.calculate_planets(now)
    """
    yield await get_shared_instance(settings)


def reset_instances():
    """Drop cached shared instances (for testing)."""
    _instances.clear()
