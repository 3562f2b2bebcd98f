"""Mapping from status values to their presentation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from wander.domain.entities.health import HealthStatus


class StatusCategory(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    WARNING = "warning"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class StatusPresentation:
    category: StatusCategory
    icon: str
    style: str
    label: str


_PRESENTATIONS = {
    HealthStatus.HEALTHY: (StatusCategory.SUCCESS, "✓", "bold green"),
    HealthStatus.UNHEALTHY: (StatusCategory.FAILURE, "✗", "bold red"),
    HealthStatus.ERROR: (StatusCategory.WARNING, "⚠", "bold yellow"),
    HealthStatus.UNKNOWN: (StatusCategory.NEUTRAL, "⏺", "dim"),
}


def present_status(value: Any) -> StatusPresentation:
    """
    Presentation for any status value.

    Matching is case-insensitive and total: absent, non-string and
    unrecognized values all fall back to the neutral presentation.
    """
    category, icon, style = _PRESENTATIONS[HealthStatus.parse(value)]
    if isinstance(value, Enum):
        value = value.value
    label = value.strip() if isinstance(value, str) and value.strip() else "unknown"
    return StatusPresentation(category=category, icon=icon, style=style, label=label)
