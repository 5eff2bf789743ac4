from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from conftest import FakeEngine
from vedasweph.calc.constants import (
    BIT_CIVIL_TWILIGHT,
    CALC_RISE,
    EQU2HOR,
    EQUATORIAL_FLAGS,
    PlanetId,
)
from vedasweph.calc.core_types import GeoLocation
from vedasweph.calc.sun_times import (
    calculate_solar_noon,
    calculate_sun_path,
    calculate_sun_times,
)
from vedasweph.errors import EngineError
from vedasweph.interfaces.engine_adapter import RawPosition

WHEN = datetime(2024, 6, 21, 12, 0, tzinfo=UTC)
LONDON = GeoLocation(latitude=51.5, longitude=-0.1)


def test_sun_times_from_local_midnight():
    times = calculate_sun_times(FakeEngine(), WHEN, LONDON)

    assert times.sunrise == datetime(2024, 6, 21, 6, 0, tzinfo=UTC)
    assert times.sunset == datetime(2024, 6, 21, 18, 0, tzinfo=UTC)
    assert times.solar_noon == datetime(2024, 6, 21, 12, 0, tzinfo=UTC)
    assert times.day_length == pytest.approx(12.0)
    assert times.civil_twilight_start < times.sunrise
    assert times.civil_twilight_end > times.sunset
    assert times.nautical_twilight_start < times.civil_twilight_start
    assert times.nautical_twilight_end > times.civil_twilight_end


def test_sun_times_request_twilight_events():
    engine = FakeEngine()
    calculate_sun_times(engine, WHEN, LONDON)
    events = [c[2] for c in engine.calls if c[0] == "rise_transit"]
    assert CALC_RISE in events
    assert CALC_RISE | BIT_CIVIL_TWILIGHT in events
    assert {c[1] for c in engine.calls if c[0] == "rise_transit"} == {PlanetId.SUN}


def test_polar_day_gives_none():
    times = calculate_sun_times(FakeEngine(circumpolar=True), WHEN, LONDON)
    assert times.sunrise is None
    assert times.sunset is None
    assert times.solar_noon is None
    assert times.day_length is None


def test_unsupported_rise_transit_gives_all_none():
    engine = FakeEngine(supports_rise_transit=False)
    times = calculate_sun_times(engine, WHEN, LONDON)
    assert all(value is None for value in times.to_dict().values())
    assert engine.calls == []


def test_rise_transit_failure_raises():
    engine = FakeEngine(failing={PlanetId.SUN})
    with pytest.raises(EngineError) as exc_info:
        calculate_sun_times(engine, WHEN, LONDON)
    assert exc_info.value.operation == "rise_transit"


def test_solar_noon_altitude_from_declination():
    engine = FakeEngine(positions={PlanetId.SUN: RawPosition(90.0, 23.44, 1.016, 0.95, 0.0, 0.0)})
    noon = calculate_solar_noon(engine, WHEN, LONDON)

    assert noon.time == datetime(2024, 6, 21, 12, 0, tzinfo=UTC)
    assert noon.altitude == pytest.approx(90.0 - (51.5 - 23.44))
    assert ("calc_position", PlanetId.SUN, EQUATORIAL_FLAGS) in engine.calls


def test_solar_noon_altitude_never_negative():
    engine = FakeEngine(positions={PlanetId.SUN: RawPosition(270.0, -23.44, 1.0, 1.0, 0.0, 0.0)})
    noon = calculate_solar_noon(engine, WHEN, GeoLocation(latitude=89.0, longitude=0.0))
    assert noon.altitude == 0.0


def test_solar_noon_absent_in_polar_night():
    noon = calculate_solar_noon(FakeEngine(circumpolar=True), WHEN, LONDON)
    assert noon.time is None
    assert noon.altitude is None


def test_sun_path_samples_local_day():
    loc = GeoLocation(latitude=28.6, longitude=77.2, timezone=5.5)
    engine = FakeEngine()
    path = calculate_sun_path(engine, WHEN, loc, interval_minutes=360)

    assert len(path) == 5
    assert path[0].time.utcoffset() == timedelta(hours=5, minutes=30)
    assert (path[0].time.hour, path[0].time.minute) == (0, 0)
    assert path[-1].time - path[0].time == timedelta(hours=24)
    assert all(c[1] == EQU2HOR for c in engine.calls if c[0] == "az_alt")
    assert path[0].azimuth == 180.0


def test_sun_path_unsupported_is_empty():
    assert calculate_sun_path(FakeEngine(supports_horizontal=False), WHEN, LONDON) == []


def test_sun_path_rejects_bad_interval():
    with pytest.raises(ValueError):
        calculate_sun_path(FakeEngine(), WHEN, LONDON, interval_minutes=0)
