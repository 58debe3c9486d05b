from __future__ import annotations

from typing import Optional

import httpx

from weathermood.core.config import Settings


_client: Optional[httpx.AsyncClient] = None


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Client shared by the NewsAPI and OpenWeatherMap calls.

    Calls are never retried; the news pipeline paces itself instead.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        limits=httpx.Limits(max_keepalive_connections=10, max_connections=20),
        headers={"User-Agent": "weathermood-api/0.1", "Accept": "application/json"},
    )


def set_http_client(client: httpx.AsyncClient | None) -> None:
    global _client
    _client = client


def get_http_client() -> httpx.AsyncClient:
    if _client is None:
        raise RuntimeError("HTTP client not initialized; the app lifespan has not started")
    return _client
