"""Configuration loader using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from weather_proxy.openweather import OPENWEATHER_URL


class Settings(BaseSettings):
    """Server configuration loaded from environment variables and .env."""

    # OpenWeatherMap API key. Left optional so a missing key fails /weather
    # requests instead of the whole process.
    open_weather_key: str | None = Field(default=None, validation_alias="openWeatherKey")

    host: str = "0.0.0.0"
    port: int = 8080
    index_path: Path = Path("index.html")

    upstream_url: str = OPENWEATHER_URL
    upstream_timeout: float = 10.0  # seconds

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "populate_by_name": True}
