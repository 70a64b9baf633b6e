"""Starlette application factory."""

import httpx
from starlette.applications import Starlette
from starlette.routing import Route

from weather_proxy.config import Settings
from weather_proxy.handlers.health import health
from weather_proxy.handlers.static import serve_home
from weather_proxy.handlers.weather import handle_weather


def create_app(
    settings: Settings | None = None,
    upstream_transport: httpx.AsyncBaseTransport | None = None,
) -> Starlette:
    """Build the app. ``upstream_transport`` replaces the network for tests."""
    app = Starlette(
        routes=[
            Route("/", serve_home, methods=["GET"]),
            Route("/health", health, methods=["GET"]),
            Route("/weather", handle_weather, methods=["GET"]),
        ]
    )
    app.state.settings = settings if settings is not None else Settings()
    app.state.upstream_transport = upstream_transport
    return app
