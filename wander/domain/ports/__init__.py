"""Domain ports package."""

from .dependency_probe import IDependencyProbe
from .health_check import IHealthCheckService

__all__ = ["IDependencyProbe", "IHealthCheckService"]
