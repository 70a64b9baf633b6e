"""OpenWeatherMap current-weather client.

Performs a single GET against the provider and reduces the payload to a
WeatherSummary. Each failure mode raises its own UpstreamError subclass so the
HTTP layer can map it to a response without inspecting provider details.
"""

import json
import logging
import math
from dataclasses import asdict, dataclass

import httpx

logger = logging.getLogger(__name__)

OPENWEATHER_URL = "http://api.openweathermap.org/data/2.5/weather"
UNITS = "metric"


class UpstreamError(Exception):
    """Base class for failures talking to the weather provider."""


class UpstreamFetchError(UpstreamError):
    """The request could not be completed or the provider returned non-2xx."""


class UpstreamReadError(UpstreamError):
    """The response body could not be read."""


class UpstreamParseError(UpstreamError):
    """The body is not JSON or lacks the expected fields."""


class MalformedUpstreamResponse(UpstreamParseError):
    """The payload parsed but its weather list is empty or invalid."""


@dataclass
class WeatherSummary:
    """Current conditions returned to our clients."""

    temperature: float  # degrees Celsius
    condition: str

    def to_dict(self) -> dict:
        return asdict(self)


def build_params(city: str, api_key: str) -> dict[str, str]:
    return {"q": city, "appid": api_key, "units": UNITS}


def parse_weather(body: bytes) -> WeatherSummary:
    """Extract main.temp and weather[0].description from a provider payload.

    Raises UpstreamParseError for invalid JSON or a missing temperature, and
    MalformedUpstreamResponse when there is no usable weather description.
    """
    try:
        data = json.loads(body)
    except ValueError as e:  # also UnicodeDecodeError and integers past the digit limit
        raise UpstreamParseError(f"Invalid JSON from provider: {e}") from e

    if not isinstance(data, dict):
        raise UpstreamParseError(f"Expected a JSON object, got {type(data).__name__}")

    main = data.get("main")
    temp = main.get("temp") if isinstance(main, dict) else None
    # bool is an int subclass but never a temperature
    if isinstance(temp, bool) or not isinstance(temp, (int, float)):
        raise UpstreamParseError(f"Missing or invalid main.temp: {temp!r}")
    try:
        temperature = float(temp)
    except OverflowError as e:
        raise UpstreamParseError(f"main.temp out of range: {e}") from e
    if not math.isfinite(temperature):
        raise UpstreamParseError(f"Non-finite main.temp: {temperature!r}")

    weather = data.get("weather")
    if not isinstance(weather, list) or not weather:
        raise MalformedUpstreamResponse("Provider returned no weather entries")

    first = weather[0]
    description = first.get("description") if isinstance(first, dict) else None
    if not isinstance(description, str):
        raise MalformedUpstreamResponse(f"Invalid weather description: {description!r}")

    return WeatherSummary(temperature=temperature, condition=description)


async def fetch_current_weather(
    city: str,
    api_key: str,
    *,
    url: str = OPENWEATHER_URL,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WeatherSummary:
    """Fetch current weather for a city in metric units."""
    async with httpx.AsyncClient(timeout=httpx.Timeout(timeout), transport=transport) as client:
        request = client.build_request("GET", url, params=build_params(city, api_key))
        try:
            resp = await client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise UpstreamFetchError(f"Request to provider failed: {e}") from e

        try:
            if not resp.is_success:
                raise UpstreamFetchError(f"Provider returned HTTP {resp.status_code}")
            try:
                body = await resp.aread()
            except httpx.HTTPError as e:
                raise UpstreamReadError(f"Failed to read provider response: {e}") from e
        finally:
            await resp.aclose()

    summary = parse_weather(body)
    logger.debug("Weather for %s: %.1f°C, %s", city, summary.temperature, summary.condition)
    return summary
