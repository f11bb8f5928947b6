"""Shared fixtures: a throwaway SQLite database per test and a recording mail API."""
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from sevenpro.config import Settings
from sevenpro.main import create_app


class MailRecorder:
    """Stands in for the mail API through ``httpx.MockTransport``."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.error: Optional[Exception] = None
        self.client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json={"id": "email_123"})

    def payloads(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def mail() -> MailRecorder:
    return MailRecorder()


@pytest.fixture
def make_settings(tmp_path):
    def _make(**overrides) -> Settings:
        values = {
            "database_url": f"sqlite+aiosqlite:///{tmp_path / 'sevenpro-test.db'}",
            "email_user": None,
            "email_pass": None,
            "email_from": None,
            "email_api_url": "https://mail.test/emails",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def make_client(make_settings, mail):
    clients = []

    def _make(**overrides) -> TestClient:
        app = create_app(make_settings(**overrides), http_client=mail.client)
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def mail_client(make_client) -> TestClient:
    return make_client(email_user="orders@7pro.test", email_pass="re_test_key")


@pytest.fixture
def order_payload() -> Dict[str, str]:
    return {
        "studentName": "Asha Verma",
        "instituteName": "City Engineering College",
        "mobile": "9876543210",
        "email": "asha@student.test",
        "city": "Pune",
        "educationLevel": "BE",
        "projectSerial": "7P-042",
        "orderedFromIdea": "yes",
        "projectTitle": "Smart Irrigation Controller",
        "projectDomain": "IoT",
        "projectConcept": "Soil moisture driven watering",
        "projectDescription": "ESP32 based controller with a mobile dashboard",
        "deadline": "2026-12-01",
        "budget": "8000",
    }
