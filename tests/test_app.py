"""Liveness, startup behaviour and the error envelope."""
import logging
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from sevenpro.main import create_app


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "message": "7 Pro backend running."}


def test_unknown_route_keeps_envelope(client):
    response = client.get("/api/unknown")

    assert response.status_code == 404
    assert response.json()["ok"] is False


def test_wrong_method_keeps_envelope(client):
    response = client.delete("/api/orders")

    assert response.status_code == 405
    assert response.json()["ok"] is False


def test_startup_warns_when_mail_disabled(make_settings, caplog):
    with caplog.at_level(logging.INFO):
        with TestClient(create_app(make_settings())):
            pass

    assert "order confirmation emails are disabled" in caplog.text


def test_unreachable_database_does_not_stop_startup(make_settings, tmp_path, caplog):
    settings = make_settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'db.sqlite'}")

    with caplog.at_level(logging.ERROR):
        with TestClient(create_app(settings)) as client:
            assert client.get("/").status_code == 200
            response = client.get("/api/orders")

    assert "Database connection error" in caplog.text
    assert response.status_code == 500
    assert response.json() == {"ok": False, "message": "Server error."}


def test_unexpected_fault_keeps_envelope_and_cors(client, caplog):
    with patch("sevenpro.api.endpoints.orders.order_service.list_recent", AsyncMock(side_effect=KeyError("boom"))):
        response = client.get("/api/orders", headers={"Origin": "http://localhost:4000"})

    assert response.status_code == 500
    assert response.json() == {"ok": False, "message": "Server error."}
    assert response.headers["access-control-allow-origin"] == "http://localhost:4000"
    assert "Unhandled error on GET /api/orders" in caplog.text
