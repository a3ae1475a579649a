"""Shared fixtures: a fake Gemini endpoint and a configured app client."""

import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app, get_gemini_client
from config.settings import Settings, get_settings


def gemini_reply(*texts: str) -> dict:
    """Build a generateContent success body with one candidate."""
    return {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": t} for t in texts]}}
        ]
    }


class FakeGemini:
    """Records the requests it receives and answers with a canned handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))

    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings():
    """Settings with a fake key, independent of the environment."""
    s = Settings()
    s.gemini_api_key = "test-key"
    s.gemini_model = "gemini-2.0-flash"
    s.gemini_api_base = "https://gemini.test/v1beta"
    s.temperature = None
    s.top_p = None
    return s


@pytest.fixture
def fake_gemini():
    return FakeGemini(lambda request: httpx.Response(200, json=gemini_reply("Hola, ¿qué moto tienes?")))


@pytest.fixture
def api(settings, fake_gemini):
    """TestClient wired to the fake Gemini transport."""

    def _client():
        with fake_gemini.client() as client:
            yield client

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_gemini_client] = _client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
