"""
Dependency container injection module - Main Layer

Composition root wiring the owned PostgreSQL and Redis resources into the
probes, the probes into the aggregator and the aggregator into the use cases.
"""

import asyncio
from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from wander.application.use_cases.health_use_cases import (
    GetApiIndexUseCase,
    GetComponentHealthUseCase,
    GetHealthStatusUseCase,
)
from wander.infrastructure.cache import RedisCache
from wander.infrastructure.database import PostgresDatabase
from wander.infrastructure.probes import PostgresProbe, RedisProbe
from wander.infrastructure.services.health_check_service import HealthCheckService
from wander.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation.controllers"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    postgres_database = providers.Singleton(
        PostgresDatabase,
        dsn=config.database.url,
        connect_timeout=config.database.connect_timeout,
        command_timeout=config.database.command_timeout,
        max_pool_size=config.database.max_pool_size,
    )

    redis_cache = providers.Singleton(
        RedisCache,
        redis_url=config.redis.url,
        socket_timeout=config.redis.socket_timeout,
        reconnect_interval=config.redis.reconnect_interval,
        reconnect_max_interval=config.redis.reconnect_max_interval,
    )

    # Probes
    database_probe = providers.Singleton(PostgresProbe, database=postgres_database)

    redis_probe = providers.Singleton(RedisProbe, cache=redis_cache)

    health_check_service = providers.Singleton(
        HealthCheckService,
        probes=providers.List(database_probe, redis_probe),
        probe_timeout=config.health.probe_timeout,
    )

    # Application (use cases)
    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_component_health_use_case = providers.Factory(
        GetComponentHealthUseCase,
        health_check_service=health_check_service,
    )

    get_api_index_use_case = providers.Factory(
        GetApiIndexUseCase,
        health_check_service=health_check_service,
        title=config.api.title,
        version=config.api.version,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle of the PostgreSQL pool and the Redis connection.

    Connection failures at startup are logged, not raised: the API must come
    up and answer its health endpoints even when a dependency is absent.
    The Redis connection is reopened in the background until shutdown.
    """
    container = get_container()

    postgres_database = container.postgres_database()
    redis_cache = container.redis_cache()
    reconnector = None

    try:
        try:
            await postgres_database.connect()
        except Exception as exc:
            logger.error("container.postgres.connect_failed", error=str(exc))
        await redis_cache.connect()
        reconnector = asyncio.create_task(redis_cache.keep_connected())

        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.resources.closing")
        if reconnector is not None:
            reconnector.cancel()
            await asyncio.gather(reconnector, return_exceptions=True)
        await redis_cache.close()
        await postgres_database.close()
        logger.info("container.resources.shutdown")
