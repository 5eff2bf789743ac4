"""
Minimal API smoke checks: availability endpoints and metrics.
"""
from __future__ import annotations

from conftest import FakeEngine
from vedasweph.calc.constants import PlanetId


def test_docs_and_metrics_accessible(client):
    docs = client.get("/api/docs")
    metrics = client.get("/metrics")
    assert docs.status_code in (200, 308)
    assert metrics.status_code == 200
    assert "vedasweph_requests_total" in metrics.text


def test_root_info(client):
    r = client.get("/")
    assert r.status_code == 200
    info = r.json()
    assert info["name"] == "vedasweph API"
    assert info["version"]


def test_health_live(client):
    r = client.get("/api/v1/health/live")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health_ready_with_working_engine(client):
    r = client.get("/api/v1/health/ready")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["platform"] == "fake"
    assert "moon_phase" in body["details"]


def test_health_ready_with_failing_engine(make_client):
    client = make_client(FakeEngine(failing={PlanetId.MOON}))
    r = client.get("/api/v1/health/ready")
    assert r.status_code == 503
    body = r.json()
    assert body["status"] == "error"
    assert "Moon" in body["details"]["error"]
