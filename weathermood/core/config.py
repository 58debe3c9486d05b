from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:8081",
]

DEFAULT_NEWS_CATEGORIES = ["general"]


def _split_list(raw: str) -> list[str]:
    parsed = raw.strip()
    if parsed.startswith("["):
        try:
            return [str(x).strip() for x in json.loads(parsed) if str(x).strip()]
        except ValueError:
            pass
    return [s.strip() for s in parsed.split(",") if s.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHERMOOD_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = Field(default="INFO")

    http_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)

    # NewsAPI
    news_api_key: str | None = Field(default=None)
    news_base_url: str = Field(default="https://newsapi.org/v2")
    news_country: str = Field(default="in", min_length=2, max_length=2)
    news_language: str = Field(default="en", min_length=2, max_length=2)
    news_headlines_page_size: int = Field(default=20, ge=1, le=100)
    news_search_page_size: int = Field(default=20, ge=1, le=100)
    news_category_search_page_size: int = Field(default=15, ge=1, le=100)
    news_category_delay_seconds: float = Field(default=0.5, ge=0.0, le=10.0)

    # OpenWeatherMap
    openweather_api_key: str | None = Field(default=None)
    weather_base_url: str = Field(default="https://api.openweathermap.org/data/2.5")
    weather_ttl_seconds: int = Field(default=600, ge=60, le=86400)

    # Used when a refresh arrives without coordinates.
    default_latitude: float | None = Field(default=None, ge=-90, le=90)
    default_longitude: float | None = Field(default=None, ge=-180, le=180)

    # Initial in-memory user settings
    default_temperature_unit: str = Field(default="celsius", pattern="^(celsius|fahrenheit)$")
    default_news_categories: Annotated[list[str], NoDecode] = Field(default_factory=lambda: list(DEFAULT_NEWS_CATEGORIES))
    default_cold_threshold: float = Field(default=10.0)
    default_hot_threshold: float = Field(default=30.0)

    refresh_rate_limit: str = Field(default="30/minute")

    @field_validator("cors_origins", "default_news_categories", mode="before")
    @classmethod
    def _parse_list(cls, value: Any) -> Any:
        # JSON array or comma-separated string.
        if isinstance(value, str):
            return _split_list(value)
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
