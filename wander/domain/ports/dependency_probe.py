"""Port for single-dependency liveness checks."""

from __future__ import annotations

from typing import Protocol


class IDependencyProbe(Protocol):
    """
    Liveness check for one backing service.

    ``name`` identifies the component in the composite payload and ``slug``
    is the path segment of its dedicated endpoint. ``check`` answers whether
    the service is reachable right now; it may raise, the aggregator turns
    exceptions into an unhealthy result.
    """

    name: str
    slug: str

    async def check(self) -> bool:
        ...
