#!/usr/bin/env python3
"""Healthcheck script for the weather proxy container.

Probes the server's /health endpoint on localhost. Exits 0 when it answers
200, 1 otherwise.
"""

import sys

import httpx

from weather_proxy.config import Settings


def is_server_healthy(url: str, transport: httpx.BaseTransport | None = None) -> bool:
    """Check whether the health endpoint at ``url`` responds with 200."""
    try:
        with httpx.Client(timeout=5, transport=transport) as client:
            return client.get(url).status_code == 200
    except httpx.HTTPError:
        return False


if __name__ == "__main__":
    port = Settings().port
    sys.exit(0 if is_server_healthy(f"http://127.0.0.1:{port}/health") else 1)
