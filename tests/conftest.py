import os

# Must be set before mindpulse.config is imported
os.environ["ENV"] = "production"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["API_KEY"] = ""

import pytest
import requests
from fastapi.testclient import TestClient

from mindpulse import config
from mindpulse.main import app
from mindpulse.models import database

TEST_KEY = "sk-test-0123456789abcdef"


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


@pytest.fixture(autouse=True)
def fresh_db():
    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def ai_key(monkeypatch):
    monkeypatch.setattr(config, "API_KEY", TEST_KEY)


@pytest.fixture
def fake_llm(monkeypatch, ai_key):
    """Replace the provider HTTP call. Returns the list of captured requests."""
    calls = []
    state = {"content": "", "exc": None, "status": 200}

    def fake_post(url, headers=None, json=None, timeout=None):
        calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if state["exc"]:
            raise state["exc"]
        return FakeResponse(state["status"], {"choices": [{"message": {"content": state["content"]}}]})

    monkeypatch.setattr("mindpulse.services.openai_service.requests.post", fake_post)

    class Controller:
        def reply(self, content):
            state["content"] = content

        def fail(self, exc):
            state["exc"] = exc

        def status(self, code):
            state["status"] = code

        @property
        def calls(self):
            return calls

    return Controller()


@pytest.fixture
def signup(client):
    def _signup(name="Ana", email="ana@example.com", group="team1", password="Secret1", role="member"):
        response = client.post("/api/signup", json={
            "name": name, "email": email, "role": role, "groupCode": group, "password": password,
        })
        assert response.status_code == 200, response.text
        return response.json()["user"]
    return _signup
