"""
Recurring health poller backing the dashboard.

The monitor evaluates once as soon as it starts and then on a fixed
interval until it is stopped. Every tick spawns its own refresh task, so a
slow request never pushes back the next tick; whichever refresh completes
last defines the displayed state.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Callable, Optional, Set

from wander.domain.entities.health import HealthState
from wander.domain.gateways.health_gateway import IHealthGateway
from wander.shared import get_logger
from wander.shared.consts import CONNECTION_ERROR_MESSAGE

logger = get_logger(__name__)

DEFAULT_POLL_INTERVAL = 5.0


class MonitorPhase(str, Enum):
    LOADING = "loading"
    DISPLAYING = "displaying"


class HealthMonitor:
    """Poll the health API and keep the latest composite state."""

    def __init__(
        self,
        gateway: IHealthGateway,
        *,
        interval: float = DEFAULT_POLL_INTERVAL,
        on_update: Optional[Callable[[HealthState], None]] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._gateway = gateway
        self._interval = interval
        self._on_update = on_update
        self._state = HealthState.unknown()
        self._phase = MonitorPhase.LOADING
        self._ticker: Optional[asyncio.Task] = None
        self._inflight: Set[asyncio.Task] = set()
        self._stopped = False

    @property
    def state(self) -> HealthState:
        return self._state

    @property
    def phase(self) -> MonitorPhase:
        return self._phase

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._ticker is not None and not self._ticker.done()

    async def refresh(self) -> HealthState:
        """Evaluate once; transport failures become an ``error`` state."""
        try:
            state = await self._gateway.fetch_health()
        except Exception as exc:
            logger.warning("monitor.refresh.failed", error=str(exc))
            state = HealthState.failed(CONNECTION_ERROR_MESSAGE)

        if self._stopped:
            return state

        self._state = state
        self._phase = MonitorPhase.DISPLAYING
        if self._on_update is not None:
            try:
                self._on_update(state)
            except Exception as exc:
                logger.error("monitor.update_callback.failed", error=str(exc), exc_info=exc)
        return state

    def start(self) -> None:
        """Begin polling on the running loop. Calling it twice is a no-op."""
        if self._stopped:
            raise RuntimeError("HealthMonitor cannot be restarted after stop()")
        if self._ticker is not None:
            return
        self._ticker = asyncio.get_running_loop().create_task(self._tick())
        logger.debug("monitor.started", interval=self._interval)

    async def stop(self) -> None:
        """Cancel the ticker and in-flight refreshes. Idempotent."""
        if self._stopped:
            return
        self._stopped = True

        tasks = list(self._inflight)
        if self._ticker is not None:
            tasks.append(self._ticker)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._inflight.clear()
        self._ticker = None
        logger.debug("monitor.stopped")

    async def __aenter__(self) -> "HealthMonitor":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    async def _tick(self) -> None:
        while True:
            task = asyncio.get_running_loop().create_task(self.refresh())
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)
            await asyncio.sleep(self._interval)
