from fastapi import APIRouter, Depends, Query

from weathermood.api.v1.deps import get_store
from weathermood.schemas.weather import (
    ConditionResponse,
    Coordinates,
    ForecastData,
    TemperatureUnit,
    WeatherData,
)
from weathermood.services.news.mood import mood_for
from weathermood.services.settings_store import SettingsStore
from weathermood.services.weather.conditions import classify_condition, to_celsius
from weathermood.services.weather.openweather import get_current_weather, get_forecast


router = APIRouter()


@router.get("/current", response_model=WeatherData)
async def current_weather(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    unit: TemperatureUnit | None = Query(None),
    store: SettingsStore = Depends(get_store),
):
    effective_unit = unit or store.snapshot().temperature_unit
    return await get_current_weather(coords=Coordinates(latitude=lat, longitude=lon), unit=effective_unit)


@router.get("/forecast", response_model=ForecastData)
async def forecast(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    unit: TemperatureUnit | None = Query(None),
    store: SettingsStore = Depends(get_store),
):
    effective_unit = unit or store.snapshot().temperature_unit
    return await get_forecast(coords=Coordinates(latitude=lat, longitude=lon), unit=effective_unit)


@router.get("/condition", response_model=ConditionResponse)
async def condition(
    temperature: float = Query(..., ge=-150, le=150),
    unit: TemperatureUnit | None = Query(None),
    store: SettingsStore = Depends(get_store),
):
    """Classify a temperature against the current thresholds."""
    current = store.snapshot()
    effective_unit = unit or current.temperature_unit
    weather_condition = classify_condition(temperature, effective_unit, current.temperature_thresholds)
    return ConditionResponse(
        temperature=temperature,
        unit=effective_unit,
        temperature_c=round(to_celsius(temperature, effective_unit), 2),
        condition=weather_condition,
        mood=mood_for(weather_condition),
        thresholds=current.temperature_thresholds,
    )
