"""Liveness probe for the Redis cache."""

from __future__ import annotations

from wander.infrastructure.cache.redis_cache import RedisCache
from wander.shared.consts import CACHE_COMPONENT


class RedisProbe:
    """
    Report the cache client's connection-state flag.

    No command is sent to Redis. A connection that dropped without the client
    noticing yet still reads as healthy until the next command fails on it.
    """

    def __init__(
        self,
        cache: RedisCache,
        *,
        name: str = CACHE_COMPONENT,
        slug: str = CACHE_COMPONENT,
    ) -> None:
        self._cache = cache
        self.name = name
        self.slug = slug

    async def check(self) -> bool:
        return self._cache.is_connected
