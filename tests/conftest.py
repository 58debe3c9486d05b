import httpx
import pytest

from weathermood.api.v1.endpoints.dashboard import limiter
from weathermood.core.config import get_settings
from weathermood.core.http import set_http_client
from weathermood.schemas.news import NewsArticle
from weathermood.services.settings_store import get_settings_store
from weathermood.services.weather.openweather import clear_weather_cache


NEWS_BASE = "https://newsapi.org/v2"
WEATHER_BASE = "https://api.openweathermap.org/data/2.5"


@pytest.fixture(autouse=True)
def _fresh_state():
    # ASGITransport does not run the lifespan, so install a client directly.
    set_http_client(httpx.AsyncClient(timeout=10.0))
    clear_weather_cache()
    get_settings_store.cache_clear()
    limiter.reset()
    yield
    set_http_client(None)
    get_settings.cache_clear()
    get_settings_store.cache_clear()


@pytest.fixture
def make_article():
    def _make(n, *, title=None, description=None, image=False):
        return NewsArticle(
            title=title or f"Story {n}",
            description=description,
            url=f"https://news.example.com/{n}",
            url_to_image=f"https://img.example.com/{n}.jpg" if image else None,
            source={"name": "Example"},
        )

    return _make


def article_payload(n, *, title=None, description=None, image=False):
    return {
        "source": {"id": None, "name": "Example"},
        "author": None,
        "title": title or f"Story {n}",
        "description": description,
        "url": f"https://news.example.com/{n}",
        "urlToImage": f"https://img.example.com/{n}.jpg" if image else None,
        "publishedAt": "2024-05-01T10:00:00Z",
        "content": None,
    }


def news_payload(articles):
    return {"status": "ok", "totalResults": len(articles), "articles": articles}


def weather_payload(temp):
    return {
        "name": "Pune",
        "dt": 1714557600,
        "main": {"temp": temp, "feels_like": temp, "humidity": 40},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "wind": {"speed": 3.1, "deg": 180},
    }


def forecast_payload(temp):
    return {
        "city": {"name": "Pune", "country": "IN"},
        "list": [
            {
                "dt": 1714568400,
                "dt_txt": "2024-05-01 13:00:00",
                "main": {"temp": temp},
                "weather": [{"id": 800, "main": "Clear"}],
            }
        ],
    }

