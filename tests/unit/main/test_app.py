from __future__ import annotations

import pytest
from dependency_injector import providers

from tests.conftest import FakePostgresDatabase, FakeRedisCache
from wander.main import app as module_app
from wander.main.app import create_app
from wander.main.container import get_container


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    database = FakePostgresDatabase()
    cache = FakeRedisCache()
    get_container().postgres_database.override(providers.Object(database))
    get_container().redis_cache.override(providers.Object(cache))

    assert app.title
    assert app.docs_url == "/api-docs"

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert database.connected is True

    assert database.closed is True
    assert cache.closed is True

    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


def test_routes_are_registered() -> None:
    paths = {route.path for route in create_app().routes}

    assert {"/health", "/api", "/api/health", "/api/health/{component}"} <= paths
