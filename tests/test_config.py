"""Tests for settings loading."""

from pathlib import Path

from weather_proxy.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("openWeatherKey", raising=False)
    settings = Settings(_env_file=None)
    assert settings.open_weather_key is None
    assert settings.port == 8080
    assert settings.index_path == Path("index.html")
    assert settings.upstream_url == "http://api.openweathermap.org/data/2.5/weather"


def test_key_from_environment(monkeypatch):
    monkeypatch.setenv("openWeatherKey", "env-key")
    assert Settings(_env_file=None).open_weather_key == "env-key"


def test_key_from_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("openWeatherKey", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("openWeatherKey=file-key\nPORT=9090\n")
    settings = Settings(_env_file=env_file)
    assert settings.open_weather_key == "file-key"
    assert settings.port == 9090
