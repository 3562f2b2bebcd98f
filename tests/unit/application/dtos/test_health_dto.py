from __future__ import annotations

from datetime import datetime, timezone

from wander.application.dtos.health_dto import (
    ApiIndexDTO,
    ComponentHealthDTO,
    HealthResponseDTO,
)
from wander.domain.entities.health import (
    ComponentHealth,
    ComponentStatus,
    HealthState,
    HealthStatus,
)


def test_health_response_dto_from_domain() -> None:
    state = HealthState.from_components(
        {"database": ComponentStatus.HEALTHY, "redis": ComponentStatus.UNHEALTHY},
        timestamp=datetime(2025, 1, 1, 12, tzinfo=timezone.utc),
    )

    dto = HealthResponseDTO.from_domain(state)

    assert dto.status is HealthStatus.UNHEALTHY
    assert dto.services == {
        "database": ComponentStatus.HEALTHY,
        "redis": ComponentStatus.UNHEALTHY,
    }
    assert dto.model_dump(mode="json", exclude_none=True) == {
        "status": "unhealthy",
        "timestamp": "2025-01-01T12:00:00Z",
        "services": {"database": "healthy", "redis": "unhealthy"},
    }


def test_failed_state_dump_has_error_without_services() -> None:
    dto = HealthResponseDTO.from_domain(HealthState.failed("pool exhausted"))

    body = dto.model_dump(mode="json", exclude_none=True)

    assert body["status"] == "error"
    assert body["error"] == "pool exhausted"
    assert "services" not in body


def test_component_health_dto_from_domain() -> None:
    health = ComponentHealth(
        name="redis", status=ComponentStatus.UNHEALTHY, error="Connection refused"
    )

    dto = ComponentHealthDTO.from_domain(health)

    assert dto.status is ComponentStatus.UNHEALTHY
    assert dto.error == "Connection refused"
    assert dto.timestamp == health.timestamp


def test_api_index_lists_component_endpoints() -> None:
    dto = ApiIndexDTO.build("Wander API", "1.0.0", ["db", "redis"])

    assert dto.message == "Wander API"
    assert dto.endpoints == {
        "health": "/api/health",
        "healthDb": "/api/health/db",
        "healthRedis": "/api/health/redis",
    }
