"""
Gateways Package - Domain Layer

Interfaces for communicating with the health API. Implementations are
provided by the infrastructure layer.
"""

from .health_gateway import IHealthGateway

__all__ = ["IHealthGateway"]
