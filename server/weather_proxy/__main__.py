"""Weather proxy entrypoint: loads settings and runs uvicorn."""

import logging

import uvicorn

from weather_proxy.app import create_app
from weather_proxy.config import Settings

logging.basicConfig(
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def main():
    settings = Settings()
    if not settings.open_weather_key:
        logger.warning("openWeatherKey is not set: /weather requests will fail until it is configured")

    app = create_app(settings)

    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
