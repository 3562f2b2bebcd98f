"""
Parallel readiness waiting for the command line.

Each target runs its own bounded retry loop. All loops are joined before a
report is produced: a failing target never cancels its siblings.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, List, Optional, Tuple

from wander.domain.gateways.health_gateway import IHealthGateway
from wander.shared import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_WAIT = 60.0
DEFAULT_CHECK_INTERVAL = 2.0

SleepFn = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class ReadinessTarget:
    name: str
    url: str

    @classmethod
    def parse(cls, raw: str) -> "ReadinessTarget":
        """Build a target from ``NAME=URL``."""
        name, sep, url = raw.partition("=")
        if not sep or not name.strip() or not url.strip():
            raise ValueError(f"Expected NAME=URL, got {raw!r}")
        return cls(name=name.strip(), url=url.strip())


@dataclass(frozen=True)
class TargetResult:
    name: str
    url: str
    ready: bool
    attempts: int
    waited: float


@dataclass(frozen=True)
class ReadinessReport:
    results: Tuple[TargetResult, ...]

    @property
    def ok(self) -> bool:
        return all(result.ready for result in self.results)

    @property
    def failed(self) -> List[TargetResult]:
        return [result for result in self.results if not result.ready]

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


class ReadinessWaiter:
    """Wait for HTTP targets to answer with a success status."""

    def __init__(
        self,
        gateway: IHealthGateway,
        *,
        max_wait: float = DEFAULT_MAX_WAIT,
        interval: float = DEFAULT_CHECK_INTERVAL,
        sleep: Optional[SleepFn] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._gateway = gateway
        self._max_wait = max_wait
        self._interval = interval
        self._sleep = sleep or asyncio.sleep

    async def wait_for(self, target: ReadinessTarget) -> TargetResult:
        """Probe ``target`` until it succeeds or the budget is spent."""
        waited = 0.0
        attempts = 0

        while waited < self._max_wait:
            attempts += 1
            if await self._attempt(target):
                logger.info(
                    "readiness.target.ready",
                    target=target.name,
                    attempts=attempts,
                    waited=waited,
                )
                return TargetResult(target.name, target.url, True, attempts, waited)
            await self._sleep(self._interval)
            waited += self._interval

        logger.warning(
            "readiness.target.timeout",
            target=target.name,
            attempts=attempts,
            max_wait=self._max_wait,
        )
        return TargetResult(target.name, target.url, False, attempts, waited)

    async def wait_all(self, targets: Iterable[ReadinessTarget]) -> ReadinessReport:
        """Run one loop per target and wait for every one of them."""
        results: List[TargetResult] = []

        async def _run(target: ReadinessTarget) -> None:
            results.append(await self.wait_for(target))

        await asyncio.gather(*(_run(target) for target in targets))
        return ReadinessReport(results=tuple(results))

    async def _attempt(self, target: ReadinessTarget) -> bool:
        try:
            return await self._gateway.probe(target.url)
        except Exception as exc:
            logger.debug("readiness.attempt.failed", target=target.name, error=str(exc))
            return False
