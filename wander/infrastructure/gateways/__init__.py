"""Gateway implementations - Infrastructure layer."""

from .health_api_gateway import HealthApiGateway

__all__ = ["HealthApiGateway"]
