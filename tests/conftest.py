from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wander.domain.entities.health import HealthState  # noqa: E402
from wander.domain.gateways.health_gateway import IHealthGateway  # noqa: E402


class FakePostgresDatabase:
    """Stand-in for PostgresDatabase returning canned rows."""

    def __init__(
        self, rows: Optional[Sequence[Any]] = None, error: Optional[Exception] = None
    ) -> None:
        self.rows = list(rows) if rows is not None else [(1,)]
        self.error = error
        self.queries: List[str] = []
        self.connected = False
        self.closed = False

    async def connect(self) -> None:
        if self.error is not None:
            raise self.error
        self.connected = True

    async def fetch(self, query: str, *args: Any) -> List[Any]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.rows

    async def close(self) -> None:
        self.closed = True


class FakeRedisCache:
    """Stand-in for RedisCache exposing a settable connection flag."""

    def __init__(self, connected: bool = True) -> None:
        self.is_connected = connected
        self.connect_calls = 0
        self.closed = False
        self.reconnecting = False
        self.reconnect_cancelled = False

    async def connect(self) -> bool:
        self.connect_calls += 1
        return self.is_connected

    async def keep_connected(self) -> None:
        self.reconnecting = True
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.reconnect_cancelled = True
            raise

    async def close(self) -> None:
        self.closed = True


@dataclass
class FakeProbe:
    name: str
    slug: str = ""
    result: bool = True
    error: Optional[Exception] = None
    delay: float = 0.0
    calls: int = 0

    def __post_init__(self) -> None:
        if not self.slug:
            self.slug = self.name

    async def check(self) -> bool:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


@dataclass
class FakeHealthGateway(IHealthGateway):
    """Gateway returning queued states and recording probe URLs."""

    states: List[Any] = field(default_factory=list)
    ready_urls: Dict[str, int] = field(default_factory=dict)
    fetch_calls: int = 0
    probed: List[str] = field(default_factory=list)

    async def fetch_health(self) -> HealthState:
        self.fetch_calls += 1
        item = self.states.pop(0) if len(self.states) > 1 else self.states[0]
        if isinstance(item, Exception):
            raise item
        return item

    async def probe(self, url: str) -> bool:
        self.probed.append(url)
        remaining = self.ready_urls.get(url)
        if remaining is None:
            return False
        if remaining <= 0:
            return True
        self.ready_urls[url] = remaining - 1
        return False


@pytest.fixture()
def fake_database() -> FakePostgresDatabase:
    return FakePostgresDatabase()


@pytest.fixture()
def fake_cache() -> FakeRedisCache:
    return FakeRedisCache()
