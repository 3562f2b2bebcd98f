"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol, Sequence

from wander.domain.entities.health import ComponentHealth, HealthState


class IHealthCheckService(Protocol):
    """Interface for retrieving system health information."""

    @property
    def component_slugs(self) -> Sequence[str]:
        """Path segments of the registered components."""
        ...

    async def evaluate(self) -> HealthState:
        """Run every probe and fold the results into one state."""
        ...

    async def check_component(self, key: str) -> ComponentHealth:
        """Read a single probe by name or slug."""
        ...
