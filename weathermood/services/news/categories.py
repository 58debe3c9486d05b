from __future__ import annotations

import logging
from typing import Sequence

from weathermood.schemas.news import NewsArticle, NewsCategory
from weathermood.services.news.fanout import fetch_isolated, fetch_rate_limited
from weathermood.services.news.merge import merge_articles
from weathermood.services.news.newsapi import NewsQueryClient


logger = logging.getLogger(__name__)

CATEGORY_NEWS_CAP = 20
FALLBACK_CATEGORY_LIMIT = 3


class CategoryAggregator:
    """Headlines for the user's selected categories."""

    def __init__(
        self,
        client: NewsQueryClient,
        *,
        delay_seconds: float = 0.5,
        fallback_limit: int = FALLBACK_CATEGORY_LIMIT,
        cap: int = CATEGORY_NEWS_CAP,
    ) -> None:
        self.client = client
        self.delay_seconds = delay_seconds
        self.fallback_limit = fallback_limit
        self.cap = cap

    async def fetch_for_categories(self, categories: Sequence[NewsCategory]) -> list[NewsArticle]:
        if not categories:
            return []

        results = await fetch_rate_limited(
            categories,
            self.client.top_headlines,
            delay_seconds=self.delay_seconds,
        )
        pool = [a for _, resp in results for a in resp.articles]

        if not pool:
            fallback_categories = list(categories[: self.fallback_limit])
            logger.info("No headlines for %s, trying fallbacks", [c.value for c in fallback_categories])
            fallbacks = await fetch_isolated(fallback_categories, self.client.get_news_with_fallback)
            pool = [a for _, resp in fallbacks for a in resp.articles]

        articles = merge_articles([pool], self.cap)
        logger.info("Loaded %d category articles", len(articles))
        return articles
