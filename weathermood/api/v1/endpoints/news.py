from fastapi import APIRouter, Depends, HTTPException, Query

from weathermood.api.v1.deps import get_category_aggregator, get_mood_fetcher, get_news_client, get_store
from weathermood.schemas.news import FeedStatus, NewsCategory, NewsFeed, NewsResponse, SortBy
from weathermood.schemas.weather import WeatherCondition
from weathermood.services.dashboard.refresh import build_feed
from weathermood.services.news.categories import CategoryAggregator
from weathermood.services.news.mood_feed import MoodNewsFetcher
from weathermood.services.news.newsapi import NewsQueryClient
from weathermood.services.settings_store import SettingsStore


router = APIRouter()


def _parse_categories(raw: str) -> list[NewsCategory]:
    parsed: dict[NewsCategory, None] = {}
    for value in raw.split(","):
        value = value.strip().lower()
        if not value:
            continue
        try:
            parsed[NewsCategory(value)] = None
        except ValueError:
            raise HTTPException(status_code=422, detail=f"Unknown news category: {value}")
    return list(parsed)


@router.get("/mood", response_model=NewsFeed)
async def mood_news(
    condition: WeatherCondition = Query(...),
    fetcher: MoodNewsFetcher = Depends(get_mood_fetcher),
):
    return await build_feed("mood", fetcher.fetch_for_condition(condition))


@router.get("/categories", response_model=NewsFeed)
async def category_news(
    categories: str | None = Query(
        None,
        description="Comma-separated categories. Defaults to the saved selection.",
        max_length=200,
    ),
    aggregator: CategoryAggregator = Depends(get_category_aggregator),
    store: SettingsStore = Depends(get_store),
):
    if categories is None:
        selected = list(store.snapshot().selected_news_categories)
    else:
        selected = _parse_categories(categories)
    if not selected:
        return NewsFeed(status=FeedStatus.DISABLED)
    return await build_feed("category", aggregator.fetch_for_categories(selected))


@router.get("/search", response_model=NewsResponse)
async def search_news(
    q: str = Query(..., min_length=1, max_length=200),
    sort_by: SortBy = Query(SortBy.RELEVANCY),
    page_size: int = Query(20, ge=1, le=100),
    client: NewsQueryClient = Depends(get_news_client),
):
    return await client.search_by_keyword(q, sort_by=sort_by, page_size=page_size)
