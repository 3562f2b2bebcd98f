"""
PostgreSQL Database - Infrastructure Layer

Owned asyncpg connection pool shared by the API handlers and the
database probe. The pool is created lazily so that the API can start, and
report itself unhealthy, while the database is still unavailable.
"""

import asyncio
from typing import Any, List, Optional

import asyncpg

from wander.shared import get_logger

logger = get_logger(__name__)


class PostgresDatabase:
    """PostgreSQL database client."""

    def __init__(
        self,
        dsn: str,
        *,
        connect_timeout: float = 5.0,
        command_timeout: float = 5.0,
        min_pool_size: int = 1,
        max_pool_size: int = 5,
    ):
        """
        Initialize the PostgreSQL database client.

        Args:
            dsn: PostgreSQL connection URI
            connect_timeout: Seconds allowed to open a connection or acquire
                one from the pool
            command_timeout: Seconds allowed for a single statement
            min_pool_size: Connections opened eagerly by the pool
            max_pool_size: Upper bound of pooled connections
        """
        self.dsn = dsn
        self.connect_timeout = connect_timeout
        self.command_timeout = command_timeout
        self.min_pool_size = min_pool_size
        self.max_pool_size = max_pool_size
        self._pool: Optional[asyncpg.Pool] = None
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(self) -> asyncpg.Pool:
        """
        Create the connection pool if it does not exist yet.

        Returns:
            The shared pool

        Raises:
            Exception: If the database cannot be reached within the timeout
        """
        async with self._lock:
            if self._pool is not None:
                return self._pool
            self._pool = await asyncpg.create_pool(
                self.dsn,
                min_size=self.min_pool_size,
                max_size=self.max_pool_size,
                timeout=self.connect_timeout,
                command_timeout=self.command_timeout,
            )
            logger.info(
                "postgres.pool.created",
                min_size=self.min_pool_size,
                max_size=self.max_pool_size,
            )
            return self._pool

    async def fetch(self, query: str, *args: Any) -> List[Any]:
        """
        Run a query and return its rows.

        Args:
            query: SQL statement
            *args: Positional query parameters

        Returns:
            List of records
        """
        pool = self._pool if self._pool is not None else await self.connect()

        async with pool.acquire(timeout=self.connect_timeout) as connection:
            return await connection.fetch(query, *args, timeout=self.command_timeout)

    async def close(self) -> None:
        """Close the connection pool."""
        async with self._lock:
            if self._pool is None:
                return
            await self._pool.close()
            self._pool = None
            logger.info("postgres.pool.closed")
