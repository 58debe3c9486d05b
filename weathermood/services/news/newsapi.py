from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any

import httpx
from pydantic import ValidationError

from weathermood.core.config import Settings
from weathermood.schemas.news import NewsArticle, NewsCategory, NewsResponse, SortBy


logger = logging.getLogger(__name__)

CATEGORY_SEARCH_TERMS = MappingProxyType(
    {
        NewsCategory.GENERAL: "India news",
        NewsCategory.BUSINESS: "India business economy",
        NewsCategory.ENTERTAINMENT: "India entertainment bollywood",
        NewsCategory.HEALTH: "India health medical",
        NewsCategory.SCIENCE: "India science technology research",
        NewsCategory.SPORTS: "India sports cricket",
        NewsCategory.TECHNOLOGY: "India technology startup tech",
    }
)


def _parse_articles(raw: Any) -> list[NewsArticle]:
    articles: list[NewsArticle] = []
    for entry in raw or []:
        try:
            articles.append(NewsArticle.model_validate(entry))
        except ValidationError:
            # NewsAPI occasionally emits placeholder entries without a url or title.
            continue
    return articles


class NewsQueryClient:
    """NewsAPI boundary.

    Every query returns a ``NewsResponse``. Transport errors, non-200 statuses
    and unreadable payloads all come back as ``NewsResponse.failed()``, so
    callers only ever inspect values.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self.client = client
        self.settings = settings

    async def _get(self, path: str, params: dict[str, Any], *, context: str) -> NewsResponse:
        settings = self.settings
        headers = {"X-Api-Key": settings.news_api_key} if settings.news_api_key else None
        url = f"{settings.news_base_url.rstrip('/')}/{path}"
        try:
            resp = await self.client.get(url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("News %s failed: %s", context, type(exc).__name__)
            return NewsResponse.failed()

        if resp.status_code != 200:
            logger.warning("News %s returned status %s", context, resp.status_code)
            return NewsResponse.failed()

        try:
            data = resp.json()
        except ValueError:
            logger.warning("News %s returned invalid JSON", context)
            return NewsResponse.failed()
        if not isinstance(data, dict) or data.get("status") != "ok":
            logger.warning("News %s returned an error payload", context)
            return NewsResponse.failed()

        articles = _parse_articles(data.get("articles"))
        logger.debug("News %s returned %d articles", context, len(articles))
        total = data.get("totalResults")
        return NewsResponse(
            status="ok",
            total_results=total if isinstance(total, int) else len(articles),
            articles=articles,
        )

    async def top_headlines(self, category: NewsCategory, country: str | None = None) -> NewsResponse:
        params = {
            "country": country or self.settings.news_country,
            "category": category.value,
            "pageSize": self.settings.news_headlines_page_size,
        }
        return await self._get("top-headlines", params, context=f"headlines[{category.value}]")

    async def search_by_keyword(
        self,
        query: str,
        *,
        sort_by: SortBy = SortBy.RELEVANCY,
        language: str | None = None,
        page_size: int | None = None,
    ) -> NewsResponse:
        params = {
            "q": query,
            "sortBy": sort_by.value,
            "language": language or self.settings.news_language,
            "pageSize": page_size or self.settings.news_search_page_size,
        }
        return await self._get("everything", params, context=f"search[{query}]")

    async def search_by_category(self, category: NewsCategory) -> NewsResponse:
        term = CATEGORY_SEARCH_TERMS.get(category, f"India {category.value}")
        return await self.search_by_keyword(
            term,
            sort_by=SortBy.PUBLISHED_AT,
            page_size=self.settings.news_category_search_page_size,
        )

    async def get_news_with_fallback(self, category: NewsCategory) -> NewsResponse:
        headlines = await self.top_headlines(category)
        if headlines.articles:
            return headlines
        logger.info("No headlines for %s, falling back to search", category.value)
        return await self.search_by_category(category)
