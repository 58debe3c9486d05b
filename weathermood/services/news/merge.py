from __future__ import annotations

from itertools import chain
from typing import Iterable

from weathermood.schemas.news import NewsArticle


def dedupe_by_url(articles: Iterable[NewsArticle]) -> list[NewsArticle]:
    seen: set[str] = set()
    unique: list[NewsArticle] = []
    for article in articles:
        if article.url in seen:
            continue
        seen.add(article.url)
        unique.append(article)
    return unique


def merge_articles(lists: Iterable[Iterable[NewsArticle]], cap: int) -> list[NewsArticle]:
    """Flatten in first-seen order, drop repeated urls, truncate to ``cap``."""
    return dedupe_by_url(chain.from_iterable(lists))[: max(cap, 0)]


def rank_by_image(articles: Iterable[NewsArticle]) -> list[NewsArticle]:
    items = list(articles)
    return [a for a in items if a.has_image] + [a for a in items if not a.has_image]
