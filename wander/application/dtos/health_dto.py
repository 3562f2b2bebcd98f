"""DTOs for the health endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from wander.domain.entities.health import (
    ComponentHealth,
    ComponentStatus,
    HealthState,
    HealthStatus,
)


class HealthResponseDTO(BaseModel):
    """Composite payload of ``/health`` and ``/api/health``."""

    status: HealthStatus = Field(description="Overall system status")
    timestamp: datetime = Field(description="Evaluation instant (UTC)")
    services: Optional[Dict[str, ComponentStatus]] = Field(
        default=None, description="Status per backing service"
    )
    error: Optional[str] = Field(
        default=None, description="Diagnostic when the evaluation itself failed"
    )

    @classmethod
    def from_domain(cls, state: HealthState) -> "HealthResponseDTO":
        return cls(
            status=state.overall,
            timestamp=state.timestamp,
            services=dict(state.components) if state.components is not None else None,
            error=state.error,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "healthy",
                "timestamp": "2025-01-01T12:00:00Z",
                "services": {"database": "healthy", "redis": "healthy"},
            }
        }
    }


class ComponentHealthDTO(BaseModel):
    """Payload of the per-component endpoints."""

    status: ComponentStatus = Field(description="Status of the component")
    timestamp: datetime = Field(description="Check instant (UTC)")
    error: Optional[str] = Field(
        default=None, description="Probe diagnostic when the check failed"
    )

    @classmethod
    def from_domain(cls, health: ComponentHealth) -> "ComponentHealthDTO":
        return cls(status=health.status, timestamp=health.timestamp, error=health.error)

    model_config = {
        "json_schema_extra": {
            "example": {"status": "unhealthy", "timestamp": "2025-01-01T12:00:00Z"}
        }
    }


class ApiIndexDTO(BaseModel):
    """Payload of the ``/api`` root."""

    message: str = Field(description="API name")
    version: str = Field(description="API version")
    endpoints: Dict[str, str] = Field(
        default_factory=dict, description="Health endpoints exposed by the API"
    )

    @classmethod
    def build(cls, title: str, version: str, slugs: List[str]) -> "ApiIndexDTO":
        endpoints = {"health": "/api/health"}
        for slug in slugs:
            endpoints[f"health{slug.title().replace('_', '')}"] = f"/api/health/{slug}"
        return cls(message=title, version=version, endpoints=endpoints)
