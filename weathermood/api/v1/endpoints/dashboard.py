from fastapi import APIRouter, Depends, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from weathermood.api.v1.deps import get_category_aggregator, get_mood_fetcher, get_store
from weathermood.core.config import get_settings
from weathermood.schemas.dashboard import DashboardRefreshResponse
from weathermood.services.dashboard.refresh import refresh_dashboard
from weathermood.services.news.categories import CategoryAggregator
from weathermood.services.news.mood_feed import MoodNewsFetcher
from weathermood.services.settings_store import SettingsStore
from weathermood.services.weather.location import resolve_location


router = APIRouter()

# Each refresh can fan out to a dozen NewsAPI calls.
limiter = Limiter(key_func=get_remote_address)


@router.get("/refresh", response_model=DashboardRefreshResponse)
@limiter.limit(get_settings().refresh_rate_limit)
async def refresh(
    request: Request,
    lat: float | None = Query(None, ge=-90, le=90),
    lon: float | None = Query(None, ge=-180, le=180),
    store: SettingsStore = Depends(get_store),
    mood_fetcher: MoodNewsFetcher = Depends(get_mood_fetcher),
    category_aggregator: CategoryAggregator = Depends(get_category_aggregator),
):
    coords = resolve_location(lat=lat, lon=lon)
    return await refresh_dashboard(
        coords=coords,
        settings=store.snapshot(),
        revision=store.revision,
        mood_fetcher=mood_fetcher,
        category_aggregator=category_aggregator,
    )
