"""
Services Package - Application Layer

Observers of the health API: the recurring monitor behind the dashboard,
the parallel readiness waiter behind ``wander wait`` and the status
presentation mapping they share.
"""

from .health_monitor import HealthMonitor, MonitorPhase
from .readiness_waiter import (
    ReadinessReport,
    ReadinessTarget,
    ReadinessWaiter,
    TargetResult,
)
from .status_presentation import StatusCategory, StatusPresentation, present_status

__all__ = [
    "HealthMonitor",
    "MonitorPhase",
    "ReadinessWaiter",
    "ReadinessTarget",
    "ReadinessReport",
    "TargetResult",
    "StatusCategory",
    "StatusPresentation",
    "present_status",
]
