"""Tests for health, root and request middleware."""

import time

from fastapi.testclient import TestClient

from fontcdn import __version__
from fontcdn.modules.health.service import HealthService
from fontcdn.shared.errors import ConfigError, RequestValidationFailed


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__
    assert data["uptime_secs"] >= 0


def test_health_uptime_non_decreasing(client: TestClient) -> None:
    first = client.get("/health").json()["uptime_secs"]
    second = client.get("/health").json()["uptime_secs"]
    assert second >= first


def test_health_service_measures_from_start():
    service = HealthService(started_at=time.monotonic() - 5.5)
    assert service.status().uptime_secs >= 5


def test_root(client: TestClient) -> None:
    assert client.get("/").json() == {"service": "font-cdn-engine", "version": __version__}


def test_request_id_generated(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.headers["X-Request-ID"].startswith("req_")


def test_request_id_echoed_on_rejection(client: TestClient) -> None:
    resp = client.post(
        "/api/v1/font/analyze",
        json={"font_name": ""},
        headers={"X-Request-ID": "req_from_caller"},
    )
    assert resp.status_code == 400
    assert resp.headers["X-Request-ID"] == "req_from_caller"


def test_validation_error_serializes_code_and_message():
    exc = RequestValidationFailed("font_name is required")
    assert exc.http_status == 400
    assert exc.to_dict() == {"code": "VALIDATION_ERROR", "message": "font_name is required"}


def test_config_error_is_value_error():
    assert isinstance(ConfigError("invalid FONT_ADDR: 'x'"), ValueError)
