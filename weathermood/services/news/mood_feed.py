from __future__ import annotations

import logging

from weathermood.schemas.news import NewsArticle
from weathermood.schemas.weather import WeatherCondition
from weathermood.services.news import mood
from weathermood.services.news.fanout import fetch_isolated
from weathermood.services.news.merge import dedupe_by_url, rank_by_image
from weathermood.services.news.newsapi import NewsQueryClient


logger = logging.getLogger(__name__)

MOOD_NEWS_LIMIT = 10
BROAD_FALLBACK_LIMIT = 5
GENERIC_QUERY_COUNT = 2


class MoodNewsFetcher:
    """News matching the mood of the current weather condition."""

    def __init__(
        self,
        client: NewsQueryClient,
        *,
        limit: int = MOOD_NEWS_LIMIT,
        fallback_limit: int = BROAD_FALLBACK_LIMIT,
        generic_query_count: int = GENERIC_QUERY_COUNT,
    ) -> None:
        self.client = client
        self.limit = limit
        self.fallback_limit = fallback_limit
        self.generic_query_count = generic_query_count

    async def fetch_matching(self, condition: WeatherCondition) -> list[NewsArticle]:
        """Keyword searches for the condition's mood, filtered and ranked."""
        news_mood = mood.mood_for(condition)
        keywords = mood.keywords_for(news_mood)
        terms = mood.search_terms(keywords, generic_count=self.generic_query_count)
        logger.info("Fetching %s news for %s weather", news_mood.value, condition.value)

        results = await fetch_isolated(terms, self.client.search_by_keyword)
        unique = dedupe_by_url(a for _, resp in results for a in resp.articles)

        relevant = mood.relevance_terms(keywords)
        matching = [a for a in unique if mood.is_relevant(a, relevant)]
        logger.info("Found %d %s articles", len(matching), news_mood.value)
        return rank_by_image(matching)[: self.limit]

    async def fetch_for_condition(self, condition: WeatherCondition) -> list[NewsArticle]:
        articles = await self.fetch_matching(condition)
        if articles:
            return articles

        query = mood.broad_query_for(mood.mood_for(condition))
        logger.info("No mood news found, trying broader search %r", query)
        [(_, broad)] = await fetch_isolated([query], self.client.search_by_keyword)
        return list(broad.articles[: self.fallback_limit])
