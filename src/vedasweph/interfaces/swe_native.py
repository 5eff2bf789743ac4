#!/usr/bin/env python3
"""
Swiss Ephemeris native backend (pyswisseph)
Thread-safe engine calls; engine errors are returned as EngineFailure values
"""

import threading

import swisseph as swe

from ..calc.constants import CIRCUMPOLAR
from ..calc.monitoring import track_engine_failure
from ..core.logging import get_engine_logger
from .engine_adapter import (
    AzAlt,
    BaseEngineAdapter,
    EngineFailure,
    RawPosition,
    RiseTransitResult,
)

# ============================================================================
# SWISS EPHEMERIS CONFIGURATION
# ============================================================================

# pyswisseph keeps sidereal mode and ephemeris path process-wide, so every
# native adapter instance shares one lock
_swe_lock = threading.RLock()

logger = get_engine_logger("native")


def _body_name(body: int) -> str:
    try:
        return swe.get_planet_name(int(body))
    except (swe.Error, TypeError, ValueError):
        return f"body {body}"


class NativeSwissAdapter(BaseEngineAdapter):
    """EngineAdapter over the compiled Swiss Ephemeris library"""

    supports_rise_transit = True
    supports_horizontal = True

    def __init__(self):
        super().__init__("native", lock=_swe_lock)

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------

    def time_to_internal(
        self, year: int, month: int, day: int, hour: float, calendar: int
    ) -> float:
        return swe.julday(year, month, day, hour, calendar)

    # ------------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------------

    def calc_position(
        self, jd_ut: float, body: int, flags: int
    ) -> RawPosition | EngineFailure:
        """Position of one body; swe.Error becomes an EngineFailure"""
        with self._lock:
            try:
                xx, _retflag = swe.calc_ut(jd_ut, int(body), flags)
            except swe.Error as e:
                return self._failure("calc_position", _body_name(body), str(e))
        return RawPosition.from_tuple(xx)

    # ------------------------------------------------------------------
    # Mode state
    # ------------------------------------------------------------------

    def set_ephemeris_path(self, path: str | None) -> None:
        with self._lock:
            swe.set_ephe_path(path)
            self._ephe_path = path
        logger.info(f"Ephemeris path set to {path or 'built-in'}")

    def set_sidereal_mode(self, mode: int, t0: float = 0.0, ayan_t0: float = 0.0) -> None:
        with self._lock:
            swe.set_sid_mode(int(mode), t0, ayan_t0)

    def get_ayanamsa(self, jd_et: float) -> float:
        with self._lock:
            return swe.get_ayanamsa(jd_et)

    def get_ayanamsa_ut(self, jd_ut: float) -> float:
        with self._lock:
            return swe.get_ayanamsa_ut(jd_ut)

    # ------------------------------------------------------------------
    # Horizon events
    # ------------------------------------------------------------------

    def rise_transit(
        self,
        jd_ut: float,
        body: int,
        star_name: str,
        engine_flags: int,
        event: int,
        geopos: tuple[float, float, float],
        pressure: float,
        temperature: float,
    ) -> RiseTransitResult | EngineFailure:
        """Next rise/set/transit after jd_ut

        A fixed star is selected by a non-empty star_name; otherwise body.
        The binding rejects int subclasses, so enum ids are unwrapped.
        """
        target = star_name if star_name else int(body)
        with self._lock:
            try:
                res, tret = swe.rise_trans(
                    jd_ut,
                    target,
                    event,
                    tuple(geopos),
                    pressure,
                    temperature,
                    engine_flags,
                )
            except swe.Error as e:
                name = star_name or _body_name(body)
                return self._failure("rise_transit", name, str(e))

        if res == CIRCUMPOLAR:
            return RiseTransitResult(transit_time=None, flag=res)
        return RiseTransitResult(transit_time=tret[0], flag=res)

    def az_alt(
        self,
        jd_ut: float,
        calc_flag: int,
        geopos: tuple[float, float, float],
        pressure: float,
        temperature: float,
        coords: tuple[float, float, float],
    ) -> AzAlt:
        with self._lock:
            azimuth, true_alt, app_alt = swe.azalt(
                jd_ut, calc_flag, tuple(geopos), pressure, temperature, tuple(coords)
            )
        return AzAlt(azimuth=azimuth, altitude=app_alt, true_altitude=true_alt)

    def version(self) -> str:
        return swe.version

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _failure(self, operation: str, target: str, message: str) -> EngineFailure:
        logger.warning(f"{operation} failed for {target}: {message}")
        track_engine_failure(operation)
        return EngineFailure(operation=operation, target=target, message=message)
