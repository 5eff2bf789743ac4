import os

from datetime import UTC, datetime, timedelta

import pytest

# Plain-text logs and no engine warmup in tests
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SWEPH_PRE_WARM", "0")

from vedasweph.calc.constants import (  # noqa: E402
    BIT_CIVIL_TWILIGHT,
    BIT_NAUTIC_TWILIGHT,
    CALC_MTRANSIT,
    CALC_RISE,
    CALC_SET,
    CIRCUMPOLAR,
    JULIAN_UNIX_EPOCH,
)
from vedasweph.calc.facade import SwephInstance  # noqa: E402
from vedasweph.core.config import SwephSettings  # noqa: E402
from vedasweph.interfaces.engine_adapter import (  # noqa: E402
    AzAlt,
    BaseEngineAdapter,
    EngineFailure,
    RawPosition,
    RiseTransitResult,
)

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# Day fractions after local midnight returned by FakeEngine.rise_transit
EVENT_OFFSETS = {
    CALC_RISE: 0.25,
    CALC_SET: 0.75,
    CALC_MTRANSIT: 0.5,
    CALC_RISE | BIT_CIVIL_TWILIGHT: 0.23,
    CALC_SET | BIT_CIVIL_TWILIGHT: 0.77,
    CALC_RISE | BIT_NAUTIC_TWILIGHT: 0.21,
    CALC_SET | BIT_NAUTIC_TWILIGHT: 0.79,
}


def default_position(body: int) -> RawPosition:
    return RawPosition(
        longitude=10.0 + 30.0 * body,
        latitude=0.5,
        distance=1.0 + body / 10.0,
        longitude_speed=1.0,
        latitude_speed=0.0,
        distance_speed=0.0,
    )


class FakeEngine(BaseEngineAdapter):
    """Deterministic engine adapter that records every call"""

    def __init__(
        self,
        platform: str = "fake",
        *,
        positions: dict[int, RawPosition] | None = None,
        failing: set[int] | None = None,
        circumpolar: bool = False,
        supports_rise_transit: bool | None = True,
        supports_horizontal: bool | None = True,
        initialized: bool = True,
    ):
        super().__init__(platform)
        self.positions = positions or {}
        self.failing = failing or set()
        self.circumpolar = circumpolar
        # None keeps the BaseEngineAdapter class defaults
        if supports_rise_transit is not None:
            self.supports_rise_transit = supports_rise_transit
        if supports_horizontal is not None:
            self.supports_horizontal = supports_horizontal
        self._initialized = initialized
        self.mode = 0
        self.load_count = 0
        self.calls: list[tuple] = []

    async def _load(self) -> None:
        self.load_count += 1

    def time_to_internal(self, year, month, day, hour, calendar):
        midnight = datetime(year, month, day, tzinfo=UTC)
        return JULIAN_UNIX_EPOCH + (midnight - UNIX_EPOCH) / timedelta(days=1) + hour / 24.0

    def calc_position(self, jd_ut, body, flags):
        assert type(body) is int, f"engine received {type(body).__name__} body id"
        self.calls.append(("calc_position", body, flags))
        if body in self.failing:
            return EngineFailure("calc_position", f"body {body}", "ephemeris file not found")
        return self.positions.get(body, default_position(body))

    def set_ephemeris_path(self, path):
        self._ephe_path = path

    def set_sidereal_mode(self, mode, t0=0.0, ayan_t0=0.0):
        self.calls.append(("set_sidereal_mode", mode))
        self.mode = mode

    def get_ayanamsa(self, jd_et):
        return self.get_ayanamsa_ut(jd_et)

    def get_ayanamsa_ut(self, jd_ut):
        return 23.0 + self.mode * 0.5 + (jd_ut - 2451545.0) / 36525.0 * 1.4

    def rise_transit(self, jd_ut, body, star_name, engine_flags, event, geopos, pressure, temperature):
        assert type(body) is int, f"engine received {type(body).__name__} body id"
        self.calls.append(("rise_transit", body, event, tuple(geopos)))
        if body in self.failing:
            return EngineFailure("rise_transit", f"body {body}", "search failed")
        if self.circumpolar:
            return RiseTransitResult(transit_time=None, flag=CIRCUMPOLAR)
        return RiseTransitResult(transit_time=jd_ut + EVENT_OFFSETS[event])

    def az_alt(self, jd_ut, calc_flag, geopos, pressure, temperature, coords):
        self.calls.append(("az_alt", calc_flag, tuple(coords)))
        return AzAlt(azimuth=180.0, altitude=coords[1], true_altitude=coords[1] - 0.1)

    def version(self):
        return "fake-1.0"

    def sidereal_modes(self) -> list[int]:
        return [c[1] for c in self.calls if c[0] == "set_sidereal_mode"]


@pytest.fixture
def settings():
    return SwephSettings.testing()


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def sweph(engine, settings):
    return SwephInstance(engine, settings)


@pytest.fixture
def make_client(settings):
    """Build a TestClient whose facade dependency is backed by a FakeEngine"""
    from fastapi.testclient import TestClient

    from vedasweph.api.deps import get_sweph
    from vedasweph.api.main import app

    def factory(engine: FakeEngine | None = None) -> TestClient:
        instance = SwephInstance(engine or FakeEngine(), settings)

        async def override():
            return instance

        app.dependency_overrides[get_sweph] = override
        return TestClient(app)

    yield factory
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def openapi_spec(client):
    r = client.get("/openapi.json")
    r.raise_for_status()
    return r.json()
