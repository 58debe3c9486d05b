from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from weathermood.schemas.news import NewsCategory, NewsFeed, NewsFilterType
from weathermood.schemas.weather import (
    Coordinates,
    ForecastData,
    TemperatureThresholds,
    TemperatureUnit,
    WeatherCondition,
    WeatherData,
)


class DashboardRefreshResponse(BaseModel):
    generated_at: datetime
    settings_revision: int
    location: Coordinates
    unit: TemperatureUnit
    weather: WeatherData
    forecast: ForecastData
    temperature_display: str
    condition: WeatherCondition
    mood: NewsFilterType
    thresholds: TemperatureThresholds
    threshold_display: dict[str, str]
    categories: list[NewsCategory]
    mood_news: NewsFeed
    category_news: NewsFeed
