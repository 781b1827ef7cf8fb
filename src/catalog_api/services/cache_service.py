"""Response cache for list endpoints.

The list read path owns ``get``/``set``; the create path only calls
``invalidate``. Payloads are JSON-compatible (lists of dicts) so both
backends store the same thing.
"""

import json
import logging
import time
from typing import Any, Callable, NamedTuple

from cachetools import TLRUCache
from redis.asyncio import Redis

from catalog_api.core.config import settings
from catalog_api.core.redis import get_redis

logger = logging.getLogger(__name__)

ALL_ORDERS_CACHE_KEY = "all_orders"
ALL_PRODUCTS_CACHE_KEY = "all_products"


class ResponseCache:
    """Keyed cache with per-entry TTL."""

    default_ttl: int = 300

    async def get(self, key: str) -> Any | None:
        raise NotImplementedError

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        raise NotImplementedError

    async def invalidate(self, key: str) -> bool:
        """Remove ``key``. Returns True if something was removed."""
        raise NotImplementedError


class _Entry(NamedTuple):
    value: Any
    ttl: int


def _time_to_use(key: str, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class LocalResponseCache(ResponseCache):
    """Process-wide in-memory cache backed by cachetools."""

    def __init__(
        self,
        maxsize: int = 128,
        default_ttl: int = 300,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.default_ttl = default_ttl
        self._cache: TLRUCache = TLRUCache(maxsize=maxsize, ttu=_time_to_use, timer=timer)

    async def get(self, key: str) -> Any | None:
        entry = self._cache.get(key)
        return entry.value if entry is not None else None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        self._cache[key] = _Entry(value, self.default_ttl if ttl is None else ttl)

    async def invalidate(self, key: str) -> bool:
        return self._cache.pop(key, None) is not None


class RedisResponseCache(ResponseCache):
    """Shared cache in Redis, JSON encoded with SETEX."""

    KEY_PREFIX = "response_cache:"

    def __init__(self, redis: Redis, default_ttl: int = 300):
        self.redis = redis
        self.default_ttl = default_ttl

    def _key(self, key: str) -> str:
        return f"{self.KEY_PREFIX}{key}"

    async def get(self, key: str) -> Any | None:
        data = await self.redis.get(self._key(key))
        if data:
            return json.loads(data)
        return None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        await self.redis.setex(
            self._key(key),
            self.default_ttl if ttl is None else ttl,
            json.dumps(value),
        )

    async def invalidate(self, key: str) -> bool:
        return bool(await self.redis.delete(self._key(key)))


_response_cache: ResponseCache | None = None


async def get_response_cache() -> ResponseCache:
    """Get or create the process-wide response cache selected by CACHE_BACKEND."""
    global _response_cache
    if _response_cache is None:
        if settings.CACHE_BACKEND == "redis":
            redis = await get_redis()
            _response_cache = RedisResponseCache(redis, default_ttl=settings.CACHE_TTL_SECONDS)
        else:
            _response_cache = LocalResponseCache(
                maxsize=settings.CACHE_MAX_ENTRIES,
                default_ttl=settings.CACHE_TTL_SECONDS,
            )
        logger.info(f"Response cache initialised with backend: {settings.CACHE_BACKEND}")
    return _response_cache
