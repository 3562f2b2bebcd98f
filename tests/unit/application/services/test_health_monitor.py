from __future__ import annotations

import asyncio
from typing import List

import pytest

from tests.conftest import FakeHealthGateway
from wander.application.services.health_monitor import HealthMonitor, MonitorPhase
from wander.domain.entities.errors import HealthGatewayError
from wander.domain.entities.health import ComponentStatus, HealthState, HealthStatus
from wander.domain.gateways.health_gateway import IHealthGateway
from wander.shared.consts import CONNECTION_ERROR_MESSAGE

HEALTHY = HealthState.from_components(
    {"database": ComponentStatus.HEALTHY, "redis": ComponentStatus.HEALTHY}
)
UNHEALTHY = HealthState.from_components(
    {"database": ComponentStatus.HEALTHY, "redis": ComponentStatus.UNHEALTHY}
)


class _DelayedGateway(IHealthGateway):
    """Answers each call with the next (delay, state) pair."""

    def __init__(self, answers: List[tuple]) -> None:
        self._answers = list(answers)

    async def fetch_health(self) -> HealthState:
        delay, state = self._answers.pop(0)
        await asyncio.sleep(delay)
        return state

    async def probe(self, url: str) -> bool:
        return False


def test_initial_state_is_loading() -> None:
    monitor = HealthMonitor(FakeHealthGateway(states=[HEALTHY]))

    assert monitor.phase is MonitorPhase.LOADING
    assert monitor.state.overall is HealthStatus.UNKNOWN
    assert monitor.interval == 5.0
    assert monitor.running is False


@pytest.mark.parametrize("interval", [0, -1.0])
def test_interval_must_be_positive(interval) -> None:
    with pytest.raises(ValueError):
        HealthMonitor(FakeHealthGateway(states=[HEALTHY]), interval=interval)


@pytest.mark.asyncio
async def test_start_evaluates_immediately_once() -> None:
    gateway = FakeHealthGateway(states=[HEALTHY])
    updates: List[HealthState] = []
    monitor = HealthMonitor(gateway, interval=10.0, on_update=updates.append)

    monitor.start()
    await asyncio.sleep(0.05)

    assert gateway.fetch_calls == 1
    assert monitor.phase is MonitorPhase.DISPLAYING
    assert monitor.state is HEALTHY
    assert updates == [HEALTHY]
    assert monitor.running is True

    await monitor.stop()


@pytest.mark.asyncio
async def test_no_evaluation_after_stop() -> None:
    gateway = FakeHealthGateway(states=[HEALTHY])

    async with HealthMonitor(gateway, interval=0.05) as monitor:
        await asyncio.sleep(0.12)

    calls = gateway.fetch_calls
    assert calls >= 2
    assert monitor.running is False

    await asyncio.sleep(0.15)
    assert gateway.fetch_calls == calls


@pytest.mark.asyncio
async def test_transport_failure_becomes_connection_error() -> None:
    gateway = FakeHealthGateway(states=[HealthGatewayError("connection refused")])
    monitor = HealthMonitor(gateway)

    state = await monitor.refresh()

    assert state.overall is HealthStatus.ERROR
    assert state.error == CONNECTION_ERROR_MESSAGE
    assert state.components is None
    assert monitor.state is state


@pytest.mark.asyncio
async def test_last_completed_refresh_wins() -> None:
    monitor = HealthMonitor(_DelayedGateway([(0.1, HEALTHY), (0.0, UNHEALTHY)]))

    await asyncio.gather(monitor.refresh(), monitor.refresh())

    assert monitor.state is HEALTHY


@pytest.mark.asyncio
async def test_stop_cancels_inflight_refresh() -> None:
    monitor = HealthMonitor(_DelayedGateway([(1.0, HEALTHY)]), interval=10.0)

    monitor.start()
    await asyncio.sleep(0.02)
    await monitor.stop()

    assert monitor.phase is MonitorPhase.LOADING
    assert monitor.state.overall is HealthStatus.UNKNOWN


@pytest.mark.asyncio
async def test_result_after_stop_is_discarded() -> None:
    monitor = HealthMonitor(FakeHealthGateway(states=[HEALTHY]))
    await monitor.stop()

    await monitor.refresh()

    assert monitor.state.overall is HealthStatus.UNKNOWN


@pytest.mark.asyncio
async def test_stop_is_idempotent_and_final() -> None:
    monitor = HealthMonitor(FakeHealthGateway(states=[HEALTHY]))
    monitor.start()

    await monitor.stop()
    await monitor.stop()

    with pytest.raises(RuntimeError):
        monitor.start()


@pytest.mark.asyncio
async def test_failing_callback_does_not_stop_polling() -> None:
    def _explode(state: HealthState) -> None:
        raise RuntimeError("render failed")

    monitor = HealthMonitor(FakeHealthGateway(states=[HEALTHY]), on_update=_explode)

    state = await monitor.refresh()

    assert state is HEALTHY
    assert monitor.state is HEALTHY
