from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone as dt_timezone
from typing import Awaitable

from weathermood.schemas.dashboard import DashboardRefreshResponse
from weathermood.schemas.news import FeedStatus, NewsArticle, NewsFeed
from weathermood.schemas.settings import UserSettings
from weathermood.schemas.weather import Coordinates
from weathermood.services.news.categories import CategoryAggregator
from weathermood.services.news.mood import mood_for
from weathermood.services.news.mood_feed import MoodNewsFetcher
from weathermood.services.weather.conditions import (
    classify_condition,
    format_temperature,
    threshold_display,
)
from weathermood.services.weather.openweather import get_current_weather, get_forecast


logger = logging.getLogger(__name__)

NEWS_ERROR_MESSAGE = "Failed to load news. Please check your internet connection."


async def build_feed(name: str, pending: Awaitable[list[NewsArticle]]) -> NewsFeed:
    try:
        articles = await pending
    except Exception:
        logger.exception("Loading %s news failed", name)
        return NewsFeed(status=FeedStatus.ERROR, error=NEWS_ERROR_MESSAGE)
    return NewsFeed.from_articles(articles)


async def refresh_dashboard(
    *,
    coords: Coordinates,
    settings: UserSettings,
    revision: int,
    mood_fetcher: MoodNewsFetcher,
    category_aggregator: CategoryAggregator,
) -> DashboardRefreshResponse:
    """Run one refresh cycle.

    Weather failures propagate and abort the cycle before any news call. The
    two news feeds are independent: one failing or coming back empty never
    affects the other.
    """
    unit = settings.temperature_unit
    weather_task = asyncio.ensure_future(get_current_weather(coords=coords, unit=unit))
    forecast_task = asyncio.ensure_future(get_forecast(coords=coords, unit=unit))
    try:
        weather, forecast = await asyncio.gather(weather_task, forecast_task)
    except Exception:
        for task in (weather_task, forecast_task):
            task.cancel()
        # Collect the sibling so its outcome is never left unretrieved.
        await asyncio.gather(weather_task, forecast_task, return_exceptions=True)
        raise

    thresholds = settings.temperature_thresholds
    condition = classify_condition(weather.main.temp, unit, thresholds)
    news_mood = mood_for(condition)
    categories = list(settings.selected_news_categories)

    if categories:
        mood_news, category_news = await asyncio.gather(
            build_feed("mood", mood_fetcher.fetch_for_condition(condition)),
            build_feed("category", category_aggregator.fetch_for_categories(categories)),
        )
    else:
        mood_news = NewsFeed(status=FeedStatus.DISABLED)
        category_news = NewsFeed(status=FeedStatus.DISABLED)

    return DashboardRefreshResponse(
        generated_at=datetime.now(dt_timezone.utc),
        settings_revision=revision,
        location=coords,
        unit=unit,
        weather=weather,
        forecast=forecast,
        temperature_display=format_temperature(weather.main.temp, unit),
        condition=condition,
        mood=news_mood,
        thresholds=thresholds,
        threshold_display=threshold_display(thresholds, unit),
        categories=categories,
        mood_news=mood_news,
        category_news=category_news,
    )
