#!/usr/bin/env python3
"""
Engine Adapter Protocol for multi-platform support
Defines the capability set every ephemeris engine binding must expose
"""

from __future__ import annotations

import asyncio
import threading

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from ..core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RawPosition:
    """Raw engine output for one body"""

    longitude: float
    latitude: float
    distance: float
    longitude_speed: float
    latitude_speed: float
    distance_speed: float

    @classmethod
    def from_tuple(cls, xx) -> "RawPosition":
        lon, lat, dist, sp_lon, sp_lat, sp_dist = xx[:6]
        return cls(lon, lat, dist, sp_lon, sp_lat, sp_dist)


@dataclass(frozen=True)
class EngineFailure:
    """Error indicator returned by an engine call"""

    operation: str
    target: str
    message: str


@dataclass(frozen=True)
class RiseTransitResult:
    """Event time as Julian day (UT); None for circumpolar bodies"""

    transit_time: float | None
    flag: int = 0


@dataclass(frozen=True)
class AzAlt:
    """Horizontal coordinates"""

    azimuth: float
    altitude: float  # apparent (refracted)
    true_altitude: float | None = None


@runtime_checkable
class EngineAdapter(Protocol):
    """
    Protocol that all engine adapters must implement
    One conforming implementation per platform (native, WASM, mobile bridge)
    """

    @property
    def platform(self) -> str:
        """Platform identifier (e.g., 'native', 'wasm', 'react-native')"""
        ...

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding the engine's mutable mode state"""
        ...

    @property
    def supports_rise_transit(self) -> bool: ...

    @property
    def supports_horizontal(self) -> bool: ...

    def time_to_internal(
        self, year: int, month: int, day: int, hour: float, calendar: int
    ) -> float:
        """
        Convert calendar fields to a Julian day

        Args:
            year, month, day: Calendar date
            hour: Fractional hour (UT)
            calendar: Calendar flag (1 = Gregorian)

        Returns:
            Julian day number
        """
        ...

    def calc_position(
        self, jd_ut: float, body: int, flags: int
    ) -> "RawPosition | EngineFailure": ...

    def set_ephemeris_path(self, path: str | None) -> None: ...

    def set_sidereal_mode(self, mode: int, t0: float = 0.0, ayan_t0: float = 0.0) -> None: ...

    def get_ayanamsa(self, jd_et: float) -> float: ...

    def get_ayanamsa_ut(self, jd_ut: float) -> float: ...

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
    ) -> "RiseTransitResult | EngineFailure": ...

    def az_alt(
        self,
        jd_ut: float,
        calc_flag: int,
        geopos: tuple[float, float, float],
        pressure: float,
        temperature: float,
        coords: tuple[float, float, float],
    ) -> AzAlt: ...

    def version(self) -> str: ...

    async def initialize(self, ephe_path: str | None = None) -> None: ...

    @property
    def initialized(self) -> bool: ...


class BaseEngineAdapter(ABC):
    """
    Base implementation of EngineAdapter with common functionality
    Concrete adapters inherit from this class
    """

    supports_rise_transit: bool = False
    supports_horizontal: bool = False

    def __init__(self, platform: str, lock: threading.RLock | None = None):
        self._platform = platform
        self._lock = lock or threading.RLock()
        self._initialized = False
        self._init_lock = asyncio.Lock()
        self._ephe_path: str | None = None

    @property
    def platform(self) -> str:
        return self._platform

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def ephe_path(self) -> str | None:
        return self._ephe_path

    async def initialize(self, ephe_path: str | None = None) -> None:
        """Load the engine once; later calls are no-ops

        A later call asking for a different ephemeris path is logged and
        ignored; use set_ephemeris_path to switch paths explicitly.
        """
        async with self._init_lock:
            if self._initialized:
                if ephe_path and ephe_path != self._ephe_path:
                    logger.warning(
                        f"{self.platform} engine already initialized with ephemeris path "
                        f"{self._ephe_path or 'built-in'}; ignoring {ephe_path}"
                    )
                return
            await self._load()
            if ephe_path:
                self.set_ephemeris_path(ephe_path)
            self._initialized = True

    async def _load(self) -> None:
        """Platform module loading hook (WASM fetch, bridge handshake)"""
        return None

    @abstractmethod
    def time_to_internal(
        self, year: int, month: int, day: int, hour: float, calendar: int
    ) -> float:
        pass

    @abstractmethod
    def calc_position(
        self, jd_ut: float, body: int, flags: int
    ) -> RawPosition | EngineFailure:
        pass

    @abstractmethod
    def set_ephemeris_path(self, path: str | None) -> None:
        pass

    @abstractmethod
    def set_sidereal_mode(self, mode: int, t0: float = 0.0, ayan_t0: float = 0.0) -> None:
        pass

    @abstractmethod
    def get_ayanamsa(self, jd_et: float) -> float:
        pass

    @abstractmethod
    def get_ayanamsa_ut(self, jd_ut: float) -> float:
        pass

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
        """Default: capability not available on this platform"""
        raise NotImplementedError(f"rise_transit not supported on {self.platform}")

    def az_alt(
        self,
        jd_ut: float,
        calc_flag: int,
        geopos: tuple[float, float, float],
        pressure: float,
        temperature: float,
        coords: tuple[float, float, float],
    ) -> AzAlt:
        """Default: capability not available on this platform"""
        raise NotImplementedError(f"az_alt not supported on {self.platform}")

    def version(self) -> str:
        return "unknown"

    def get_metadata(self) -> dict[str, Any]:
        """Default metadata - override in subclasses"""
        return {
            "platform": self.platform,
            "version": self.version(),
            "initialized": self.initialized,
            "ephe_path": self.ephe_path,
            "supports_rise_transit": self.supports_rise_transit,
            "supports_horizontal": self.supports_horizontal,
        }
