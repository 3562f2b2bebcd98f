"""Infrastructure implementation for system health checks."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from time import perf_counter
from typing import Dict, Iterable, List, Sequence

from wander.domain.entities.errors import UnknownComponentError
from wander.domain.entities.health import (
    ComponentHealth,
    ComponentStatus,
    HealthState,
)
from wander.domain.ports.dependency_probe import IDependencyProbe
from wander.domain.ports.health_check import IHealthCheckService
from wander.shared import get_logger

logger = get_logger(__name__)


class HealthCheckService(IHealthCheckService):
    """Run the registered probes and fold their results."""

    def __init__(
        self,
        probes: Iterable[IDependencyProbe],
        *,
        probe_timeout: float = 5.0,
    ) -> None:
        self._probes: List[IDependencyProbe] = list(probes)
        self._probe_timeout = probe_timeout

    @property
    def component_names(self) -> Sequence[str]:
        return [probe.name for probe in self._probes]

    @property
    def component_slugs(self) -> Sequence[str]:
        return [probe.slug for probe in self._probes]

    async def evaluate(self) -> HealthState:
        """Run checks concurrently and aggregate system health."""

        try:
            results = await asyncio.gather(
                *(self._run_probe(probe) for probe in self._probes)
            )
            state = HealthState.from_components(
                self._fold(results), timestamp=datetime.now(timezone.utc)
            )
        except Exception as exc:
            logger.error("health.aggregation.failed", error=str(exc), exc_info=exc)
            return HealthState.failed(str(exc))

        logger.debug("health.evaluated", status=state.overall.value)
        return state

    async def check_component(self, key: str) -> ComponentHealth:
        """Read one probe without touching the others."""

        for probe in self._probes:
            if key in (probe.name, probe.slug):
                return await self._run_probe(probe)
        raise UnknownComponentError(key, details={"known": self.component_slugs})

    def _fold(self, results: Iterable[ComponentHealth]) -> Dict[str, ComponentStatus]:
        components: Dict[str, ComponentStatus] = {}
        for result in results:
            if result.name in components:
                raise ValueError(f"Duplicate health component: {result.name}")
            components[result.name] = result.status
        return components

    async def _run_probe(self, probe: IDependencyProbe) -> ComponentHealth:
        name = probe.name
        start = perf_counter()
        try:
            ok = await asyncio.wait_for(probe.check(), timeout=self._probe_timeout)
        except asyncio.TimeoutError:
            return self._unhealthy(
                name, f"Probe timed out after {self._probe_timeout:g}s", start
            )
        except Exception as exc:
            return self._unhealthy(name, str(exc) or type(exc).__name__, start)

        if not ok:
            return self._unhealthy(name, None, start)

        logger.debug(
            "health.probe.ok",
            component=name,
            latency_ms=(perf_counter() - start) * 1000,
        )
        return ComponentHealth(name=name, status=ComponentStatus.HEALTHY)

    def _unhealthy(
        self, name: str, diagnostic: str | None, start: float
    ) -> ComponentHealth:
        logger.warning(
            "health.probe.failed",
            component=name,
            error=diagnostic,
            latency_ms=(perf_counter() - start) * 1000,
        )
        return ComponentHealth(
            name=name, status=ComponentStatus.UNHEALTHY, error=diagnostic
        )
