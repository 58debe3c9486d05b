import asyncio
from unittest.mock import AsyncMock

import pytest

from weathermood.schemas.news import NewsResponse
from weathermood.services.news import fanout


@pytest.mark.asyncio
async def test_rate_limited_runs_sequentially_with_delay_between_calls(monkeypatch):
    sleep = AsyncMock()
    monkeypatch.setattr(fanout.asyncio, "sleep", sleep)
    order = []

    async def fetch(label):
        order.append(label)
        return NewsResponse()

    results = await fanout.fetch_rate_limited(["a", "b", "c"], fetch, delay_seconds=0.5)

    assert order == ["a", "b", "c"]
    assert [label for label, _ in results] == ["a", "b", "c"]
    assert sleep.await_count == 2
    sleep.assert_awaited_with(0.5)


@pytest.mark.asyncio
async def test_rate_limited_single_item_does_not_sleep(monkeypatch):
    sleep = AsyncMock()
    monkeypatch.setattr(fanout.asyncio, "sleep", sleep)

    await fanout.fetch_rate_limited(["only"], AsyncMock(return_value=NewsResponse()), delay_seconds=0.5)

    sleep.assert_not_awaited()


@pytest.mark.asyncio
async def test_rate_limited_isolates_failures():
    async def fetch(label):
        if label == "bad":
            raise RuntimeError("boom")
        return NewsResponse(status="ok", total_results=0, articles=[])

    results = dict(await fanout.fetch_rate_limited(["good", "bad", "also"], fetch, delay_seconds=0))

    assert results["bad"].status == "error"
    assert results["good"].ok
    assert results["also"].ok


@pytest.mark.asyncio
async def test_isolated_runs_concurrently():
    started = asyncio.Event()
    running = 0
    peak = 0

    async def fetch(label):
        nonlocal running, peak
        running += 1
        peak = max(peak, running)
        if running == 3:
            started.set()
        await asyncio.wait_for(started.wait(), timeout=1)
        running -= 1
        return NewsResponse()

    await fanout.fetch_isolated(["a", "b", "c"], fetch)

    assert peak == 3


@pytest.mark.asyncio
async def test_isolated_failure_does_not_abort_siblings(make_article):
    async def fetch(label):
        if label == "timeout":
            raise asyncio.TimeoutError()
        return NewsResponse(articles=[make_article(label)])

    results = await fanout.fetch_isolated(["x", "timeout", "y"], fetch)

    assert [label for label, _ in results] == ["x", "timeout", "y"]
    assert results[1][1] == NewsResponse.failed()
    assert results[0][1].articles[0].url.endswith("/x")
    assert results[2][1].articles[0].url.endswith("/y")
