"""
Request/response models for the vedasweph API - Pydantic V2 compliant.
"""

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.functional_validators import AfterValidator

from ..calc.constants import BODIES_BY_ID, HOUSE_SYSTEMS, AyanamsaType
from ..calc.core_types import CalculationOptions, GeoLocation

# --- Validators ---


def ensure_utc(dt: datetime) -> datetime:
    """Ensure datetime is UTC timezone-aware"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def validate_ayanamsa(v: int | None) -> int | None:
    if v is not None and v not in AyanamsaType._value2member_map_:
        raise ValueError(f"Ayanamsa must be one of 0-20, got {v}")
    return v


def validate_body_id(v: int) -> int:
    if v not in BODIES_BY_ID:
        raise ValueError(f"Unknown body id {v}; known: {sorted(BODIES_BY_ID)}")
    return v


UTCDateTime = Annotated[datetime, AfterValidator(ensure_utc)]
Ayanamsa = Annotated[int | None, AfterValidator(validate_ayanamsa)]
BodyId = Annotated[int, AfterValidator(validate_body_id)]


# --- Request Models ---


class LocationModel(BaseModel):
    """Observer location"""

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(
        ..., ge=-180, le=180, description="Longitude in decimal degrees"
    )
    altitude: float = Field(0.0, description="Altitude in meters")
    timezone: float = Field(0.0, ge=-14, le=14, description="UTC offset in hours")

    def to_geo(self) -> GeoLocation:
        return GeoLocation(
            latitude=self.latitude,
            longitude=self.longitude,
            altitude=self.altitude,
            timezone=self.timezone,
        )


class PlanetsRequest(BaseModel):
    """Request for the full planet list"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "timestamp": "2024-08-20T14:30:00Z",
                "ayanamsa": 1,
                "include_outer_planets": False,
            }
        }
    )

    timestamp: UTCDateTime = Field(..., description="Instant for calculation (UTC)")
    ayanamsa: Ayanamsa = Field(None, description="Ayanamsa code (default: Lahiri)")
    include_outer_planets: bool = Field(False, description="Append Uranus/Neptune/Pluto")
    house_system: str | None = Field(None, description="House system letter")
    location: LocationModel | None = None

    @field_validator("house_system")
    @classmethod
    def validate_house_system(cls, v):
        if v is not None and v not in HOUSE_SYSTEMS.values():
            raise ValueError(f"Unknown house system {v!r}")
        return v

    def to_options(self) -> CalculationOptions:
        return CalculationOptions(
            location=self.location.to_geo() if self.location else None,
            ayanamsa=self.ayanamsa,
            house_system=self.house_system,
            include_outer_planets=self.include_outer_planets,
        )


class PlanetRequest(BaseModel):
    timestamp: UTCDateTime = Field(..., description="Instant for calculation (UTC)")
    ayanamsa: Ayanamsa = Field(None, description="Ayanamsa code (default: Lahiri)")


class LocalDayRequest(BaseModel):
    """Instant plus observer; events are searched on the observer's local day"""

    timestamp: UTCDateTime = Field(..., description="Instant within the local day (UTC)")
    location: LocationModel


class MoonDataRequest(BaseModel):
    timestamp: UTCDateTime = Field(..., description="Instant for calculation (UTC)")
    location: LocationModel | None = None


class SunPathRequest(LocalDayRequest):
    interval_minutes: int | None = Field(
        None, ge=1, le=720, description="Sampling interval (default from settings)"
    )


# --- Response Models ---


class PlanetResponse(BaseModel):
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


class PlanetsResponse(BaseModel):
    timestamp: datetime
    ayanamsa: int
    planets: list[PlanetResponse]


class RiseSetResponse(BaseModel):
    rise: datetime | None = None
    set: datetime | None = None
    transit: datetime | None = None
    transit_altitude: float | None = None
    transit_distance: float | None = None


class MoonPhaseResponse(BaseModel):
    phase: float
    illumination: float
    age: float
    phase_name: str


class MoonDataResponse(MoonPhaseResponse):
    distance: float
    moonrise: datetime | None = None
    moonset: datetime | None = None
    transit: datetime | None = None


class NextMoonPhasesResponse(BaseModel):
    new_moon: datetime
    first_quarter: datetime
    full_moon: datetime
    last_quarter: datetime


class SunTimesResponse(BaseModel):
    sunrise: datetime | None = None
    sunset: datetime | None = None
    solar_noon: datetime | None = None
    day_length: float | None = None
    civil_twilight_start: datetime | None = None
    civil_twilight_end: datetime | None = None
    nautical_twilight_start: datetime | None = None
    nautical_twilight_end: datetime | None = None


class SolarNoonResponse(BaseModel):
    time: datetime | None = None
    altitude: float | None = None


class SunPathPointResponse(BaseModel):
    time: datetime
    azimuth: float
    altitude: float


class AyanamsaResponse(BaseModel):
    value: float = Field(..., description="Ayanamsa in degrees")
    ayanamsa: int
    julian_day: float


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
    platform: str | None = None
    details: dict[str, Any] | None = None


class Problem(BaseModel):
    """RFC 7807 problem details"""

    type: str = "about:blank"
    title: str
    status: int
    detail: str | None = None
    instance: str | None = None
    extensions: dict[str, Any] | None = None
