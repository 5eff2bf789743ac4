from __future__ import annotations

import logging

import pytest

from vedasweph.core import config
from vedasweph.core.config import SwephSettings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in (
        "SWEPH_PLATFORM",
        "SWEPH_EPHE_PATH",
        "SWEPH_PRE_WARM",
        "SWEPH_DEFAULT_AYANAMSA",
        "SWEPH_INCLUDE_OUTER",
        "SWEPH_PRESSURE",
        "SWEPH_TEMPERATURE",
        "SWEPH_SUN_PATH_INTERVAL",
    ):
        monkeypatch.delenv(name, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()


def test_defaults():
    s = SwephSettings.from_env()
    assert s.platform == "native"
    assert s.ephe_path is None
    assert s.default_ayanamsa == 1
    assert s.include_outer_planets is False
    assert s.sun_path_interval_minutes == 30


def test_from_env(monkeypatch):
    monkeypatch.setenv("SWEPH_PLATFORM", "wasm")
    monkeypatch.setenv("SWEPH_EPHE_PATH", "/srv/ephe")
    monkeypatch.setenv("SWEPH_DEFAULT_AYANAMSA", "3")
    monkeypatch.setenv("SWEPH_INCLUDE_OUTER", "yes")
    monkeypatch.setenv("SWEPH_PRESSURE", "1013.25")
    monkeypatch.setenv("SWEPH_SUN_PATH_INTERVAL", "15")

    s = SwephSettings.from_env()
    assert s.platform == "wasm"
    assert s.ephe_path == "/srv/ephe"
    assert s.default_ayanamsa == 3
    assert s.include_outer_planets is True
    assert s.atmospheric_pressure == pytest.approx(1013.25)
    assert s.sun_path_interval_minutes == 15


def test_invalid_values_are_ignored(monkeypatch, caplog):
    monkeypatch.setenv("SWEPH_DEFAULT_AYANAMSA", "lahiri")
    monkeypatch.setenv("SWEPH_TEMPERATURE", "warm")
    with caplog.at_level(logging.WARNING, logger="vedasweph.core.config"):
        s = SwephSettings.from_env()
    assert s.default_ayanamsa == 1
    assert s.atmospheric_temperature == 0.0
    assert "SWEPH_DEFAULT_AYANAMSA" in caplog.text


def test_unknown_ayanamsa_code_falls_back(monkeypatch):
    monkeypatch.setenv("SWEPH_DEFAULT_AYANAMSA", "99")
    assert SwephSettings.from_env().default_ayanamsa == 1


def test_custom_prefix(monkeypatch):
    monkeypatch.setenv("ASTRO_PLATFORM", "react-native")
    assert SwephSettings.from_env(prefix="ASTRO_").platform == "react-native"


def test_validation():
    with pytest.raises(ValueError):
        SwephSettings(default_ayanamsa=42)
    with pytest.raises(ValueError):
        SwephSettings(sun_path_interval_minutes=0)


def test_presets():
    assert SwephSettings.production().log_format == "json"
    testing = SwephSettings.testing()
    assert testing.log_level == "DEBUG"
    assert testing.log_format == "text"


def test_global_settings_lifecycle(monkeypatch):
    monkeypatch.setenv("SWEPH_DEFAULT_AYANAMSA", "5")
    assert config.get_settings().default_ayanamsa == 5
    assert config.get_settings() is config.get_settings()

    config.reset_settings()
    custom = SwephSettings(default_ayanamsa=7)
    assert config.initialize_settings(custom) is custom
    assert config.initialize_settings(SwephSettings()) is custom
