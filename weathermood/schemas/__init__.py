from __future__ import annotations

from weathermood.schemas.news import NewsArticle, NewsCategory, NewsFilterType, NewsResponse
from weathermood.schemas.weather import TemperatureThresholds, TemperatureUnit, WeatherCondition

__all__ = [
    "NewsArticle",
    "NewsCategory",
    "NewsFilterType",
    "NewsResponse",
    "TemperatureThresholds",
    "TemperatureUnit",
    "WeatherCondition",
]
