"""
Redis Cache - Infrastructure Layer

Owned Redis client for the API. A single dedicated connection is used so
that its connection state can be read without issuing a command.
"""

import asyncio
from typing import Optional

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from wander.shared import get_logger

logger = get_logger(__name__)


class RedisCache:
    """Redis cache client."""

    def __init__(
        self,
        redis_url: str,
        *,
        socket_timeout: float = 5.0,
        reconnect_interval: float = 1.0,
        reconnect_max_interval: float = 30.0,
        client: Optional[aioredis.Redis] = None,
    ):
        """
        Initialize the Redis cache client.

        Args:
            redis_url: Redis connection URL
            socket_timeout: Seconds allowed to connect and for each command
            reconnect_interval: First delay between background reconnections
            reconnect_max_interval: Upper bound of the reconnection backoff
            client: Preconfigured client, mainly for tests
        """
        self.redis_url = redis_url
        self.reconnect_interval = reconnect_interval
        self.reconnect_max_interval = max(reconnect_interval, reconnect_max_interval)
        self.client: aioredis.Redis = client or aioredis.from_url(
            redis_url,
            single_connection_client=True,
            socket_connect_timeout=socket_timeout,
            socket_timeout=socket_timeout,
        )

    @property
    def is_connected(self) -> bool:
        """Connection-state flag of the dedicated connection."""
        connection = getattr(self.client, "connection", None)
        return connection is not None and bool(connection.is_connected)

    async def connect(self) -> bool:
        """
        Open the dedicated connection.

        Failures are logged rather than raised so the API keeps serving and
        reports the cache as unhealthy.

        Returns:
            bool: True if the connection is up
        """
        try:
            await self.client.ping()
        except (RedisError, OSError) as exc:
            logger.error("redis.connect.failed", url=self.redis_url, error=str(exc))
            return False
        logger.info("redis.connect.success")
        return True

    async def keep_connected(self) -> None:
        """
        Reopen the dedicated connection whenever it is down.

        Failed attempts back off exponentially from ``reconnect_interval`` to
        ``reconnect_max_interval``. Runs until cancelled.
        """
        delay = self.reconnect_interval
        while True:
            if self.is_connected or await self.connect():
                delay = self.reconnect_interval
                await asyncio.sleep(self.reconnect_interval)
                continue
            logger.debug("redis.reconnect.scheduled", delay=delay)
            await asyncio.sleep(delay)
            delay = min(delay * 2, self.reconnect_max_interval)

    async def close(self) -> None:
        """Close the client and its connection."""
        await self.client.aclose()
        logger.info("redis.closed")
