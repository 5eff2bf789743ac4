#!/usr/bin/env python3
"""
Core data types for the calculation layer
Immutable inputs (location, options, reference frame) and derived results
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

from .constants import HOUSE_SYSTEMS

if TYPE_CHECKING:
    from ..interfaces.engine_adapter import EngineAdapter


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


# ============================================================================
# INPUTS
# ============================================================================


@dataclass(frozen=True)
class GeoLocation:
    """Observer location; timezone is the UTC offset in hours"""

    latitude: float
    longitude: float
    altitude: float = 0.0
    timezone: float = 0.0

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")
        if not -14.0 <= self.timezone <= 14.0:
            raise ValueError(f"Timezone offset out of range: {self.timezone}")

    @property
    def geopos(self) -> tuple[float, float, float]:
        """Engine geographic triple (lon, lat, alt)"""
        return (self.longitude, self.latitude, self.altitude)

    @property
    def tzinfo(self) -> timezone:
        return timezone(timedelta(hours=self.timezone))


NEUTRAL_LOCATION = GeoLocation(latitude=0.0, longitude=0.0)


@dataclass(frozen=True)
class CalculationOptions:
    """Per-call options

    ayanamsa selects the sidereal frame (None -> configured default).
    house_system is passed through to house-calculation collaborators.
    """

    location: GeoLocation | None = None
    ayanamsa: int | None = None
    house_system: str | None = None
    include_outer_planets: bool = False

    def __post_init__(self):
        if (
            self.house_system is not None
            and self.house_system not in HOUSE_SYSTEMS.values()
        ):
            raise ValueError(f"Unknown house system: {self.house_system!r}")


@dataclass(frozen=True)
class ReferenceFrame:
    """Sidereal reference frame applied to the engine before position calls"""

    ayanamsa: int
    t0: float = 0.0
    ayan_t0: float = 0.0

    def apply(self, engine: EngineAdapter) -> None:
        engine.set_sidereal_mode(self.ayanamsa, self.t0, self.ayan_t0)


# ============================================================================
# RESULTS
# ============================================================================


@dataclass(frozen=True)
class Planet:
    """Derived planet position"""

    id: str
    name: str
    longitude: float
    latitude: float
    distance: float
    speed: float
    rashi: int
    rashi_degree: float
    nakshatra: int
    pada: int
    is_retrograde: bool
    total_degree: float | None = None
    house: int | None = None
    azimuth: float | None = None
    altitude: float | None = None
    is_combust: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MoonPhase:
    """Location-independent lunar phase"""

    phase: float
    illumination: float
    age: float
    phase_name: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MoonData:
    """Moon phase, distance and local rise/set/transit"""

    phase: float
    illumination: float
    age: float
    phase_name: str
    distance: float  # kilometers
    moonrise: datetime | None = None
    moonset: datetime | None = None
    transit: datetime | None = None

    def to_phase(self) -> MoonPhase:
        return MoonPhase(
            phase=self.phase,
            illumination=self.illumination,
            age=self.age,
            phase_name=self.phase_name,
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        for key in ("moonrise", "moonset", "transit"):
            data[key] = _iso(data[key])
        return data


@dataclass(frozen=True)
class RiseSetTransit:
    """Rise, set and upper meridian transit; None when absent or unsupported"""

    rise: datetime | None = None
    set: datetime | None = None
    transit: datetime | None = None
    transit_altitude: float | None = None  # degrees, 90 - |lat - decl|
    transit_distance: float | None = None  # AU

    def to_dict(self) -> dict[str, Any]:
        return {
            "rise": _iso(self.rise),
            "set": _iso(self.set),
            "transit": _iso(self.transit),
            "transit_altitude": self.transit_altitude,
            "transit_distance": self.transit_distance,
        }


@dataclass(frozen=True)
class SunTimes:
    """Sunrise, sunset and twilight boundaries for one local day"""

    sunrise: datetime | None = None
    sunset: datetime | None = None
    solar_noon: datetime | None = None
    day_length: float | None = None  # hours
    civil_twilight_start: datetime | None = None
    civil_twilight_end: datetime | None = None
    nautical_twilight_start: datetime | None = None
    nautical_twilight_end: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            key: (_iso(value) if isinstance(value, datetime) else value)
            for key, value in asdict(self).items()
        }


@dataclass(frozen=True)
class SolarNoon:
    time: datetime | None
    altitude: float | None

    def to_dict(self) -> dict[str, Any]:
        return {"time": _iso(self.time), "altitude": self.altitude}


@dataclass(frozen=True)
class SunPathPoint:
    time: datetime
    azimuth: float
    altitude: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "time": _iso(self.time),
            "azimuth": self.azimuth,
            "altitude": self.altitude,
        }


@dataclass(frozen=True)
class NextMoonPhases:
    """Approximate dates of the next principal phases"""

    new_moon: datetime
    first_quarter: datetime
    full_moon: datetime
    last_quarter: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "new_moon": _iso(self.new_moon),
            "first_quarter": _iso(self.first_quarter),
            "full_moon": _iso(self.full_moon),
            "last_quarter": _iso(self.last_quarter),
        }
