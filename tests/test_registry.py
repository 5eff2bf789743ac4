from __future__ import annotations

import pytest

from conftest import FakeEngine
from vedasweph.errors import UnsupportedPlatformError
from vedasweph.interfaces.engine_adapter import EngineAdapter
from vedasweph.interfaces.initialize import get_platform_status
from vedasweph.interfaces.registry import AdapterRegistry


@pytest.fixture
def registry():
    return AdapterRegistry()


def test_fake_engine_satisfies_protocol():
    assert isinstance(FakeEngine(), EngineAdapter)


def test_register_and_get(registry):
    engine = FakeEngine("wasm")
    assert registry.register(engine) is True
    assert registry.get("wasm") is engine
    assert registry.list_platforms() == ["wasm"]


def test_duplicate_rejected_unless_forced(registry):
    registry.register(FakeEngine("wasm"))
    with pytest.raises(ValueError):
        registry.register(FakeEngine("wasm"))

    replacement = FakeEngine("wasm")
    registry.register(replacement, force=True)
    assert registry.get("wasm") is replacement


def test_non_adapter_rejected(registry):
    with pytest.raises(TypeError):
        registry.register(object())


def test_default_selection(registry):
    registry.register(FakeEngine("react-native"))
    with pytest.raises(UnsupportedPlatformError):
        registry.get_or_default()

    registry.set_default("react-native")
    assert registry.default_platform == "react-native"
    assert registry.get_or_default().platform == "react-native"


def test_set_default_requires_registration(registry):
    with pytest.raises(ValueError):
        registry.set_default("wasm")


def test_unknown_platform(registry):
    with pytest.raises(UnsupportedPlatformError, match="wasm"):
        registry.get_or_default("wasm")


def test_unregister_and_clear(registry):
    registry.register(FakeEngine("wasm"))
    assert registry.unregister("wasm") is True
    assert registry.unregister("wasm") is False

    registry.register(FakeEngine("wasm"))
    registry.clear()
    assert registry.list_platforms() == []
    assert registry.default_platform == "native"


def test_metadata(registry):
    registry.register(FakeEngine("wasm", supports_horizontal=False))
    meta = registry.get_all_metadata()["wasm"]
    assert meta["version"] == "fake-1.0"
    assert meta["supports_horizontal"] is False


def test_platform_status_shape():
    status = get_platform_status()
    assert set(status) == {
        "registered_platforms",
        "default_platform",
        "total_platforms",
        "metadata",
    }
    assert status["total_platforms"] == len(status["registered_platforms"])
