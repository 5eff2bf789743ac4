from __future__ import annotations

import pytest

from vedasweph.calc.angles_indices import (
    format_longitude,
    get_house_position,
    get_moon_phase_name,
    get_nakshatra,
    get_rashi,
    get_rashi_degree,
    is_retrograde,
    nakshatra_lord,
    nakshatra_name,
    rashi_name,
)
from vedasweph.calc.constants import NAKSHATRA_SPAN


@pytest.mark.parametrize(
    "longitude,expected",
    [(0.0, 1), (29.999, 1), (30.0, 2), (359.999, 12), (360.0, 1), (-0.5, 12), (725.0, 1)],
)
def test_get_rashi(longitude, expected):
    assert get_rashi(longitude) == expected


def test_rashi_constant_within_each_sign():
    for sign in range(12):
        start = sign * 30.0
        values = {get_rashi(start + offset) for offset in (0.0, 7.5, 15.0, 29.99)}
        assert values == {sign + 1}


def test_rashi_degree_and_names():
    assert get_rashi_degree(45.5) == pytest.approx(15.5)
    assert get_rashi_degree(-10.0) == pytest.approx(20.0)
    assert rashi_name(0.0) == "Aries"
    assert rashi_name(359.0) == "Pisces"
    assert format_longitude(15.5125) == "15°30'45\" Aries"


def test_format_longitude_carries_into_next_sign():
    assert format_longitude(29.99999) == "0°0'0\" Taurus"
    assert format_longitude(59.99999) == "0°0'0\" Gemini"
    assert format_longitude(359.99999) == "0°0'0\" Aries"


def test_nakshatra_start_of_zodiac():
    n = get_nakshatra(0.0)
    assert (n.number, n.pada) == (1, 1)
    assert n.name == "Ashwini"
    assert n.lord == "Ketu"


def test_nakshatra_boundary_at_half_circle():
    n = get_nakshatra(NAKSHATRA_SPAN * 13.5)
    assert (n.number, n.pada) == (14, 3)


def test_nakshatra_end_of_zodiac():
    n = get_nakshatra(359.9999)
    assert (n.number, n.pada) == (27, 4)
    assert nakshatra_name(359.9999) == "Revati"
    assert nakshatra_lord(359.9999) == "Mercury"


def test_nakshatra_pada_steps():
    # Each pada spans 3°20'
    assert get_nakshatra(3.34).pada == 2
    assert get_nakshatra(13.34).number == 2
    assert get_nakshatra(13.34).pada == 1


def test_is_retrograde():
    assert is_retrograde(-0.001) is True
    assert is_retrograde(0.0) is False
    assert is_retrograde(1.2) is False


@pytest.mark.parametrize(
    "angle,name",
    [
        (0.0, "New Moon"),
        (22.4, "New Moon"),
        (22.5, "Waxing Crescent"),
        (90.0, "First Quarter"),
        (135.0, "Waxing Gibbous"),
        (180.0, "Full Moon"),
        (270.0, "Last Quarter"),
        (315.0, "Waning Crescent"),
        (359.9, "New Moon"),
    ],
)
def test_moon_phase_names(angle, name):
    assert get_moon_phase_name(angle) == name


def test_house_position_with_wrapping_cusp():
    cusps = [(300.0 + 30.0 * i) % 360.0 for i in range(12)]
    assert get_house_position(305.0, cusps) == 1
    assert get_house_position(355.0, cusps) == 2
    assert get_house_position(5.0, cusps) == 3
    assert get_house_position(299.0, cusps) == 12


def test_house_position_requires_twelve_cusps():
    with pytest.raises(ValueError):
        get_house_position(10.0, [0.0] * 11)
