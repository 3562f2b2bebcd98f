from __future__ import annotations

import asyncio
from typing import List

import pytest

from tests.conftest import FakeHealthGateway
from wander.application.services.readiness_waiter import (
    ReadinessReport,
    ReadinessTarget,
    ReadinessWaiter,
    TargetResult,
)

API = ReadinessTarget("API", "http://localhost:8080/health")
FRONTEND = ReadinessTarget("Frontend", "http://localhost:3000")


class _RecordingSleep:
    def __init__(self) -> None:
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        await asyncio.sleep(0)


def _waiter(gateway: FakeHealthGateway, sleep: _RecordingSleep, **kwargs) -> ReadinessWaiter:
    return ReadinessWaiter(gateway, sleep=sleep, **kwargs)


@pytest.mark.asyncio
async def test_ready_target_succeeds_on_first_attempt() -> None:
    gateway = FakeHealthGateway(ready_urls={API.url: 0})
    sleep = _RecordingSleep()

    result = await _waiter(gateway, sleep).wait_for(API)

    assert result == TargetResult("API", API.url, True, 1, 0.0)
    assert sleep.calls == []


@pytest.mark.asyncio
async def test_target_ready_after_failures() -> None:
    gateway = FakeHealthGateway(ready_urls={API.url: 2})
    sleep = _RecordingSleep()

    result = await _waiter(gateway, sleep, interval=2).wait_for(API)

    assert result.ready is True
    assert result.attempts == 3
    assert result.waited == 4.0
    assert sleep.calls == [2, 2]


@pytest.mark.asyncio
async def test_budget_bounds_attempts() -> None:
    gateway = FakeHealthGateway()
    sleep = _RecordingSleep()

    result = await _waiter(gateway, sleep, max_wait=6, interval=2).wait_for(FRONTEND)

    # attempts at waited = 0, 2 and 4; failure reported at 6
    assert result.ready is False
    assert result.attempts == 3
    assert result.waited == 6.0
    assert gateway.probed == [FRONTEND.url] * 3


@pytest.mark.asyncio
async def test_zero_budget_makes_no_attempt() -> None:
    gateway = FakeHealthGateway(ready_urls={API.url: 0})

    result = await _waiter(gateway, _RecordingSleep(), max_wait=0).wait_for(API)

    assert result.ready is False
    assert result.attempts == 0


@pytest.mark.asyncio
async def test_failing_target_does_not_cancel_siblings() -> None:
    gateway = FakeHealthGateway(ready_urls={API.url: 1})

    report = await _waiter(gateway, _RecordingSleep(), max_wait=6, interval=2).wait_all(
        [API, FRONTEND]
    )

    by_name = {result.name: result for result in report.results}
    assert set(by_name) == {"API", "Frontend"}
    assert by_name["API"].ready is True
    assert by_name["Frontend"].ready is False
    assert report.ok is False
    assert report.failed == [by_name["Frontend"]]
    assert report.exit_code == 1


@pytest.mark.asyncio
async def test_probe_exception_counts_as_not_ready() -> None:
    class _BrokenGateway(FakeHealthGateway):
        async def probe(self, url: str) -> bool:
            raise RuntimeError("socket exploded")

    result = await _waiter(_BrokenGateway(), _RecordingSleep(), max_wait=2).wait_for(API)

    assert result.ready is False
    assert result.attempts == 1


def test_report_exit_codes() -> None:
    ready = TargetResult("API", API.url, True, 1, 0.0)
    assert ReadinessReport(results=(ready,)).exit_code == 0
    assert ReadinessReport(results=()).ok is True


def test_waiter_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        ReadinessWaiter(FakeHealthGateway(), interval=0)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("API=http://localhost:8080/health", API),
        (" Redis = http://x/api/health/redis ", ReadinessTarget("Redis", "http://x/api/health/redis")),
        ("Q=http://h/?a=b", ReadinessTarget("Q", "http://h/?a=b")),
    ],
)
def test_target_parse(raw, expected) -> None:
    assert ReadinessTarget.parse(raw) == expected


@pytest.mark.parametrize("raw", ["http://localhost", "=http://localhost", "API="])
def test_target_parse_rejects_malformed(raw) -> None:
    with pytest.raises(ValueError):
        ReadinessTarget.parse(raw)
