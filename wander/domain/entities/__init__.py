"""
Domain Entities Package

Health value objects and domain errors.
"""

from .errors import DomainError, HealthGatewayError, UnknownComponentError
from .health import ComponentHealth, ComponentStatus, HealthState, HealthStatus

__all__ = [
    "HealthStatus",
    "ComponentStatus",
    "HealthState",
    "ComponentHealth",
    "DomainError",
    "UnknownComponentError",
    "HealthGatewayError",
]
