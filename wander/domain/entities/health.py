"""
Health domain entities.

Value objects describing the liveness of the backing services and the
composite status folded from them. Every evaluation produces a fresh,
immutable :class:`HealthState`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HealthStatus(str, Enum):
    """Composite status of the deployment."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    UNKNOWN = "unknown"
    ERROR = "error"

    @classmethod
    def parse(cls, value: Any) -> "HealthStatus":
        """Map any wire value to a status, ``UNKNOWN`` when unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN


class ComponentStatus(str, Enum):
    """Status of a single backing service."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"

    @classmethod
    def from_bool(cls, ok: bool) -> "ComponentStatus":
        return cls.HEALTHY if ok else cls.UNHEALTHY

    @classmethod
    def parse(cls, value: Any) -> "ComponentStatus":
        if isinstance(value, str) and value.strip().lower() == cls.HEALTHY.value:
            return cls.HEALTHY
        return cls.UNHEALTHY


def _fold(components: Mapping[str, ComponentStatus]) -> HealthStatus:
    if all(status == ComponentStatus.HEALTHY for status in components.values()):
        return HealthStatus.HEALTHY
    return HealthStatus.UNHEALTHY


@dataclass(frozen=True, slots=True)
class HealthState:
    """
    Composite health produced by one evaluation.

    With a non-empty ``components`` mapping, a ``healthy`` or ``unhealthy``
    overall must match the fold of the components.
    """

    overall: HealthStatus
    timestamp: datetime = field(default_factory=_utcnow)
    components: Optional[Mapping[str, ComponentStatus]] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.overall is not HealthStatus.ERROR:
            raise ValueError("error is only allowed when overall is 'error'")
        if self.components is not None and not isinstance(
            self.components, MappingProxyType
        ):
            object.__setattr__(
                self, "components", MappingProxyType(dict(self.components))
            )
        if self.components and self.overall in (
            HealthStatus.HEALTHY,
            HealthStatus.UNHEALTHY,
        ):
            if self.overall is not _fold(self.components):
                raise ValueError(
                    f"overall '{self.overall.value}' contradicts the component statuses"
                )

    @classmethod
    def from_components(
        cls,
        components: Mapping[str, ComponentStatus],
        timestamp: Optional[datetime] = None,
    ) -> "HealthState":
        """Fold component statuses; healthy iff every entry is healthy."""
        return cls(
            overall=_fold(components),
            timestamp=timestamp or _utcnow(),
            components=components,
        )

    @classmethod
    def failed(cls, message: str, timestamp: Optional[datetime] = None) -> "HealthState":
        """State for an evaluation that could not be carried out."""
        return cls(
            overall=HealthStatus.ERROR,
            timestamp=timestamp or _utcnow(),
            error=message,
        )

    @classmethod
    def unknown(cls) -> "HealthState":
        """Client-side placeholder before the first evaluation completes."""
        return cls(overall=HealthStatus.UNKNOWN)

    @property
    def is_healthy(self) -> bool:
        return self.overall is HealthStatus.HEALTHY


@dataclass(frozen=True, slots=True)
class ComponentHealth:
    """Result of reading a single probe."""

    name: str
    status: ComponentStatus
    timestamp: datetime = field(default_factory=_utcnow)
    error: Optional[str] = None

    @property
    def is_healthy(self) -> bool:
        return self.status is ComponentStatus.HEALTHY
