from __future__ import annotations

import logging
from typing import Any

import httpx
from fastapi import HTTPException
from pydantic import ValidationError

from weathermood.core.cache import make_ttl_cache
from weathermood.core.config import get_settings
from weathermood.core.http import get_http_client
from weathermood.schemas.weather import Coordinates, ForecastData, TemperatureUnit, WeatherData


logger = logging.getLogger(__name__)

UNITS_PARAM = {
    TemperatureUnit.CELSIUS: "metric",
    TemperatureUnit.FAHRENHEIT: "imperial",
}


_settings = get_settings()
_weather_cache = make_ttl_cache(maxsize=512, ttl_seconds=_settings.weather_ttl_seconds)


def clear_weather_cache() -> None:
    _weather_cache.clear()


async def _fetch(endpoint: str, coords: Coordinates, unit: TemperatureUnit) -> dict[str, Any]:
    client = get_http_client()
    settings = get_settings()
    params = {
        "lat": coords.latitude,
        "lon": coords.longitude,
        "units": UNITS_PARAM[unit],
    }
    if settings.openweather_api_key:
        params["appid"] = settings.openweather_api_key

    url = f"{settings.weather_base_url.rstrip('/')}/{endpoint}"
    try:
        resp = await client.get(url, params=params)
    except httpx.HTTPError as exc:
        logger.warning("Weather %s request failed: %s", endpoint, type(exc).__name__)
        raise HTTPException(status_code=502, detail=f"Weather upstream error: {type(exc).__name__}")

    if resp.status_code != 200:
        logger.warning("Weather %s returned status %s", endpoint, resp.status_code)
        raise HTTPException(status_code=502, detail=f"Weather upstream status {resp.status_code}")

    try:
        return resp.json()
    except ValueError:
        raise HTTPException(status_code=502, detail="Weather upstream returned invalid JSON")


async def get_current_weather(*, coords: Coordinates, unit: TemperatureUnit) -> WeatherData:
    key = ("current", round(coords.latitude, 4), round(coords.longitude, 4), unit.value)

    async def loader() -> WeatherData:
        data = await _fetch("weather", coords, unit)
        try:
            return WeatherData.model_validate(data)
        except ValidationError:
            raise HTTPException(status_code=502, detail="Weather upstream returned an unexpected payload")

    return await _weather_cache.get_or_set(key, loader)


async def get_forecast(*, coords: Coordinates, unit: TemperatureUnit) -> ForecastData:
    key = ("forecast", round(coords.latitude, 4), round(coords.longitude, 4), unit.value)

    async def loader() -> ForecastData:
        data = await _fetch("forecast", coords, unit)
        try:
            return ForecastData.model_validate(data)
        except ValidationError:
            raise HTTPException(status_code=502, detail="Forecast upstream returned an unexpected payload")

    return await _weather_cache.get_or_set(key, loader)
