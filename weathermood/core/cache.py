from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Hashable, TypeVar

from cachetools import TTLCache

T = TypeVar("T")


@dataclass
class AsyncTTLCache:
    """TTL cache for coroutine results.

    The loader runs outside the lock, so two concurrent misses on the same key
    may both hit upstream; the later result wins.
    """

    cache: TTLCache
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def get_or_set(self, key: Hashable, loader: Callable[[], Awaitable[T]]) -> T:
        async with self.lock:
            if key in self.cache:
                return self.cache[key]
        value = await loader()
        async with self.lock:
            self.cache[key] = value
        return value

    def clear(self) -> None:
        self.cache.clear()


def make_ttl_cache(*, maxsize: int, ttl_seconds: int) -> AsyncTTLCache:
    return AsyncTTLCache(cache=TTLCache(maxsize=maxsize, ttl=ttl_seconds))
