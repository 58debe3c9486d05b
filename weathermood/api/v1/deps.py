from __future__ import annotations

from fastapi import Depends

from weathermood.core.config import Settings, get_settings
from weathermood.core.http import get_http_client
from weathermood.services.news.categories import CategoryAggregator
from weathermood.services.news.mood_feed import MoodNewsFetcher
from weathermood.services.news.newsapi import NewsQueryClient
from weathermood.services.settings_store import SettingsStore, get_settings_store


def get_app_settings() -> Settings:
    return get_settings()


def get_store() -> SettingsStore:
    return get_settings_store()


def get_news_client(settings: Settings = Depends(get_app_settings)) -> NewsQueryClient:
    return NewsQueryClient(get_http_client(), settings)


def get_mood_fetcher(client: NewsQueryClient = Depends(get_news_client)) -> MoodNewsFetcher:
    return MoodNewsFetcher(client)


def get_category_aggregator(
    client: NewsQueryClient = Depends(get_news_client),
    settings: Settings = Depends(get_app_settings),
) -> CategoryAggregator:
    return CategoryAggregator(client, delay_seconds=settings.news_category_delay_seconds)
