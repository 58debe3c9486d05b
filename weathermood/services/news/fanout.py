"""The two ways the pipeline issues batches of news queries.

``fetch_rate_limited`` walks its inputs one at a time with a fixed pause in
between, to stay under the provider's request rate. ``fetch_isolated`` launches
everything at once. Both capture each call's failure as an empty response so a
single bad call never fails the batch. Results keep input order.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Sequence, TypeVar

from weathermood.schemas.news import NewsResponse


logger = logging.getLogger(__name__)

T = TypeVar("T")

Fetch = Callable[[T], Awaitable[NewsResponse]]


async def _guarded(label: T, fetch: Fetch) -> NewsResponse:
    try:
        return await fetch(label)
    except Exception:
        logger.warning("News query for %r failed", label, exc_info=True)
        return NewsResponse.failed()


async def fetch_rate_limited(
    labels: Sequence[T],
    fetch: Fetch,
    *,
    delay_seconds: float,
) -> list[tuple[T, NewsResponse]]:
    results: list[tuple[T, NewsResponse]] = []
    for i, label in enumerate(labels):
        results.append((label, await _guarded(label, fetch)))
        if i < len(labels) - 1:
            await asyncio.sleep(delay_seconds)
    return results


async def fetch_isolated(labels: Sequence[T], fetch: Fetch) -> list[tuple[T, NewsResponse]]:
    responses = await asyncio.gather(*(_guarded(label, fetch) for label in labels))
    return list(zip(labels, responses))
