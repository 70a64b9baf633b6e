"""Shared test fixtures."""

import httpx
import pytest
from starlette.testclient import TestClient

from weather_proxy.app import create_app
from weather_proxy.config import Settings

CLEAR_SKY = {"main": {"temp": 21.5}, "weather": [{"description": "clear sky"}]}


@pytest.fixture
def api_key():
    return "test-key-123"


@pytest.fixture
def settings(api_key, tmp_path):
    return Settings(openWeatherKey=api_key, index_path=tmp_path / "index.html", _env_file=None)


@pytest.fixture
def upstream():
    """Stub provider: records requests and replays a configurable reply."""

    class Upstream:
        def __init__(self):
            self.requests = []
            self.reply = lambda request: httpx.Response(200, json=CLEAR_SKY)

        def __call__(self, request):
            self.requests.append(request)
            return self.reply(request)

    return Upstream()


@pytest.fixture
def client(settings, upstream):
    app = create_app(settings, upstream_transport=httpx.MockTransport(upstream))
    with TestClient(app) as c:
        yield c
