"""Weather proxy handler: GET /weather?city=<name>."""

import logging

from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse

from weather_proxy.openweather import (
    MalformedUpstreamResponse,
    UpstreamError,
    UpstreamFetchError,
    UpstreamParseError,
    UpstreamReadError,
    fetch_current_weather,
)

logger = logging.getLogger(__name__)

# Most specific first: MalformedUpstreamResponse is an UpstreamParseError.
ERROR_MESSAGES = (
    (UpstreamFetchError, "Error fetching weather data"),
    (UpstreamReadError, "Error reading response body"),
    (MalformedUpstreamResponse, "Unexpected upstream response shape"),
    (UpstreamParseError, "Error parsing JSON"),
)


async def handle_weather(request: Request):
    """Return {"temperature", "condition"} for the requested city."""
    city = request.query_params.get("city", "")
    if not city.strip():
        return PlainTextResponse("City parameter is required", status_code=400)

    settings = request.app.state.settings
    if not settings.open_weather_key:
        logger.error("openWeatherKey is not configured; cannot serve /weather")
        return PlainTextResponse("Weather service is not configured", status_code=500)

    try:
        summary = await fetch_current_weather(
            city,
            settings.open_weather_key,
            url=settings.upstream_url,
            timeout=settings.upstream_timeout,
            transport=request.app.state.upstream_transport,
        )
    except UpstreamError as e:
        logger.warning("Weather lookup for %r failed: %s", city, e)
        message = next((msg for exc, msg in ERROR_MESSAGES if isinstance(e, exc)), "Error fetching weather data")
        return PlainTextResponse(message, status_code=500)

    return JSONResponse(summary.to_dict())
