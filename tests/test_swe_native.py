"""
Checks against the real pyswisseph engine.

These touch the process-wide Swiss Ephemeris state, so they share the
module lock held by NativeSwissAdapter.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

swe = pytest.importorskip("swisseph")

from vedasweph.calc import constants as c  # noqa: E402
from vedasweph.calc.core_types import GeoLocation  # noqa: E402
from vedasweph.calc.facade import create_sweph  # noqa: E402
from vedasweph.calc.time_utils import date_to_internal, internal_to_date  # noqa: E402
from vedasweph.core.config import SwephSettings  # noqa: E402
from vedasweph.interfaces.engine_adapter import (  # noqa: E402
    EngineFailure,
    RawPosition,
    RiseTransitResult,
)
from vedasweph.interfaces.swe_native import NativeSwissAdapter  # noqa: E402

pytestmark = pytest.mark.native


@pytest.fixture(scope="module")
def native():
    return NativeSwissAdapter()


def test_constants_match_engine():
    assert c.FLG_SWIEPH == swe.FLG_SWIEPH
    assert c.FLG_SPEED == swe.FLG_SPEED
    assert c.FLG_EQUATORIAL == swe.FLG_EQUATORIAL
    assert c.FLG_SIDEREAL == swe.FLG_SIDEREAL
    assert c.GREGORIAN_CALENDAR == swe.GREG_CAL
    assert c.CALC_RISE == swe.CALC_RISE
    assert c.CALC_SET == swe.CALC_SET
    assert c.CALC_MTRANSIT == swe.CALC_MTRANSIT
    assert c.BIT_CIVIL_TWILIGHT == swe.BIT_CIVIL_TWILIGHT
    assert c.BIT_NAUTIC_TWILIGHT == swe.BIT_NAUTIC_TWILIGHT
    assert c.ECL2HOR == swe.ECL2HOR
    assert c.EQU2HOR == swe.EQU2HOR
    assert c.PlanetId.TRUE_NODE == swe.TRUE_NODE
    assert c.PlanetId.PLUTO == swe.PLUTO
    assert c.AyanamsaType.LAHIRI == swe.SIDM_LAHIRI
    assert c.AyanamsaType.RAMAN == swe.SIDM_RAMAN


def test_round_trip_1900_to_2100(native):
    start = datetime(1900, 1, 1, 3, 17, 41, tzinfo=UTC)
    when = start
    while when.year <= 2100:
        back = internal_to_date(date_to_internal(native, when), 0)
        assert abs((back - when).total_seconds()) < 1.0, when
        when += timedelta(days=1234, hours=7, minutes=13)


def test_lahiri_and_raman_differ(native):
    jd = date_to_internal(native, datetime(2024, 1, 1, tzinfo=UTC))
    with native.lock:
        native.set_sidereal_mode(c.AyanamsaType.LAHIRI)
        lahiri = native.get_ayanamsa_ut(jd)
        native.set_sidereal_mode(c.AyanamsaType.RAMAN)
        raman = native.get_ayanamsa_ut(jd)
    assert 23.0 < lahiri < 25.0
    assert lahiri != raman


def test_calc_position_returns_raw_position(native):
    jd = date_to_internal(native, datetime(2024, 1, 1, tzinfo=UTC))
    result = native.calc_position(jd, c.PlanetId.SUN, c.TROPICAL_FLAGS)
    assert isinstance(result, RawPosition)
    assert 270.0 < result.longitude < 290.0
    assert 0.9 < result.longitude_speed < 1.1


def test_engine_error_becomes_failure(native):
    result = native.calc_position(2451545.0, 99999, c.TROPICAL_FLAGS)
    assert isinstance(result, EngineFailure)
    assert result.operation == "calc_position"


@pytest.mark.asyncio
async def test_facade_on_native_engine():
    sweph = await create_sweph(SwephSettings(), engine=NativeSwissAdapter())
    when = datetime(2024, 8, 20, 14, 30, tzinfo=UTC)

    planets = {p.id: p for p in sweph.calculate_planets(when)}
    assert len(planets) == 9
    gap = (planets["ketu"].longitude - planets["rahu"].longitude) % 360.0
    assert gap == pytest.approx(180.0)

    london = GeoLocation(latitude=51.5, longitude=-0.13)
    times = sweph.calculate_sun_times(when, london)
    assert times.sunrise.hour in (4, 5)
    assert times.sunrise < times.solar_noon < times.sunset
    assert 13.0 < times.day_length < 16.0

    moon = sweph.calculate_moon_data(when, london)
    assert 0.0 <= moon.illumination <= 100.0
    assert 356_000 < moon.distance < 407_000

    rst = sweph.calculate_planet_rise_set_times(c.PlanetId.MOON, when, london)
    assert rst.transit is not None
    assert -90.0 <= rst.transit_altitude <= 90.0
    assert 0.002 < rst.transit_distance < 0.003

    noon = sweph.calculate_solar_noon(when, london)
    assert 45.0 < noon.altitude < 55.0


def test_rise_transit_accepts_enum_body_ids(native):
    jd = date_to_internal(native, datetime(2024, 8, 20, tzinfo=UTC))
    result = native.rise_transit(
        jd, c.PlanetId.SUN, "", c.FLG_SWIEPH, c.CALC_RISE, (-0.13, 51.5, 0.0), 0.0, 0.0
    )
    assert isinstance(result, RiseTransitResult)
    assert jd < result.transit_time < jd + 1.0
