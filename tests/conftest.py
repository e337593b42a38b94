import json
from typing import Any, Dict, Optional

import pytest
import requests
from fastapi.testclient import TestClient

from subscribe_api.config import Settings, get_settings
from subscribe_api.main import app


class FakeResponse:
    """Stands in for requests.Response; only status_code and text are read."""

    def __init__(self, status_code: int, payload: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def settings() -> Settings:
    return Settings(mailerlite_api_key="test-key", cors_allow_origin="https://a.com https://b.com")


@pytest.fixture
def client(settings: Settings):
    app.dependency_overrides[get_settings] = lambda: settings
    test_client = TestClient(app)
    yield test_client
    test_client.close()
    app.dependency_overrides.clear()


@pytest.fixture
def upstream(monkeypatch: pytest.MonkeyPatch) -> Dict[str, Any]:
    """Record outbound calls; set state["response"] or state["raises"] to steer them."""
    state: Dict[str, Any] = {"calls": [], "response": FakeResponse(200, {"data": {"id": "1"}})}

    def fake_post(url: str, json: Any = None, headers: Any = None, timeout: Any = None):
        state["calls"].append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if "raises" in state:
            raise state["raises"]
        return state["response"]

    monkeypatch.setattr(requests, "post", fake_post)
    return state
