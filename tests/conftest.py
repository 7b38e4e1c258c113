"""Shared fixtures.

Provides:
- a FastAPI TestClient for the table service, backed by a throwaway SQLite file
- a fake transport for exercising ``TableClient`` without a network
- a transport that routes ``TableClient`` calls through the TestClient
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./mindfulspace-test.db")
os.environ.setdefault("BACKEND_SESSION_SECRET", "test-backend-token")

import pytest
from fastapi.testclient import TestClient

from backend import settings
from dashboard.context import AuthUser
from dashboard.data.api_client import ApiError
from dashboard.data.tables import TableClient

TEST_USER_ID = "tester@example.com"
OTHER_USER_ID = "other@example.com"
BACKEND_TOKEN = "test-backend-token"


def _headers(user_id=TEST_USER_ID):
    return {"X-User-Id": user_id, "X-Backend-Token": BACKEND_TOKEN}


@pytest.fixture()
def headers():
    return _headers


@pytest.fixture()
def api(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'mindfulspace.db'}")
    monkeypatch.setenv("BACKEND_SESSION_SECRET", BACKEND_TOKEN)
    monkeypatch.delenv("ALLOWED_EMAILS", raising=False)
    settings.reset_settings()

    from backend.main import create_app

    with TestClient(create_app()) as client:
        yield client
    settings.reset_settings()


@pytest.fixture()
def user():
    return AuthUser(id=TEST_USER_ID, email=TEST_USER_ID, first_name="Tess", last_name="Ter")


class FakeTransport:
    def __init__(self):
        self.calls = []
        self.responses = []
        self.error = None

    def __call__(self, method, path, params=None, json=None):
        self.calls.append({"method": method, "path": path, "params": params, "json": json})
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return {"data": []}


@pytest.fixture()
def transport():
    return FakeTransport()


@pytest.fixture()
def table_client(transport):
    return TableClient(transport=transport)


@pytest.fixture()
def service_client(api):
    def _transport(method, path, params=None, json=None):
        response = api.request(method, path, params=params, json=json, headers=_headers())
        if not response.is_success:
            raise ApiError(response.status_code, response.reason_phrase, response.json())
        return response.json()

    return TableClient(transport=_transport)
