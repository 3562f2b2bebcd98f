"""System endpoints exposing the composite and per-component health."""

from datetime import datetime, timezone

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wander.application.dtos.health_dto import (
    ApiIndexDTO,
    ComponentHealthDTO,
    HealthResponseDTO,
)
from wander.application.use_cases.health_use_cases import (
    GetApiIndexUseCase,
    GetComponentHealthUseCase,
    GetHealthStatusUseCase,
)
from wander.domain.entities.errors import UnknownComponentError
from wander.domain.entities.health import ComponentStatus, HealthStatus
from wander.shared import get_logger

logger = get_logger(__name__)

# Bare /health for platform liveness/readiness probes that cannot use a prefix.
router = APIRouter(tags=["System"])
api_router = APIRouter(prefix="/api", tags=["System"])

_UNAVAILABLE = {
    status.HTTP_503_SERVICE_UNAVAILABLE: {"description": "Dependency unavailable"}
}


def status_code_for(value: HealthStatus | ComponentStatus) -> int:
    """200 for a healthy status, 503 for anything else."""
    if value.value == HealthStatus.HEALTHY.value:
        return status.HTTP_200_OK
    return status.HTTP_503_SERVICE_UNAVAILABLE


def _respond(dto: BaseModel, value: HealthStatus | ComponentStatus) -> JSONResponse:
    return JSONResponse(
        status_code=status_code_for(value),
        content=dto.model_dump(mode="json", exclude_none=True),
    )


async def _composite_health(use_case: GetHealthStatusUseCase) -> JSONResponse:
    try:
        dto = await use_case.execute()
    except Exception as exc:
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        dto = HealthResponseDTO(
            status=HealthStatus.ERROR,
            timestamp=datetime.now(timezone.utc),
            error=str(exc) or "Unable to retrieve system health status",
        )
    logger.debug("health.check.completed", status=dto.status.value)
    return _respond(dto, dto.status)


@router.get(
    "/health", response_model=HealthResponseDTO, responses=_UNAVAILABLE
)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> JSONResponse:
    """Return the composite health status of the deployment."""
    return await _composite_health(get_health_status_use_case)


@api_router.get("", response_model=ApiIndexDTO)
@inject
async def api_index(
    get_api_index_use_case: GetApiIndexUseCase = Depends(
        Provide["get_api_index_use_case"]
    ),
) -> ApiIndexDTO:
    """Describe the API and its health endpoints."""
    return get_api_index_use_case.execute()


@api_router.get(
    "/health", response_model=HealthResponseDTO, responses=_UNAVAILABLE
)
@inject
async def api_health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> JSONResponse:
    """Return the composite health status under the API prefix."""
    return await _composite_health(get_health_status_use_case)


@api_router.get(
    "/health/{component}", response_model=ComponentHealthDTO, responses=_UNAVAILABLE
)
@inject
async def component_health(
    component: str,
    get_component_health_use_case: GetComponentHealthUseCase = Depends(
        Provide["get_component_health_use_case"]
    ),
) -> JSONResponse:
    """Return the status of a single dependency, e.g. ``db`` or ``redis``."""
    try:
        dto = await get_component_health_use_case.execute(component)
    except UnknownComponentError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc
    except Exception as exc:
        logger.error(
            "health.component.failure", component=component, error=str(exc), exc_info=exc
        )
        dto = ComponentHealthDTO(
            status=ComponentStatus.UNHEALTHY,
            timestamp=datetime.now(timezone.utc),
            error=str(exc) or "Unable to retrieve component health",
        )
    logger.debug("health.component.completed", component=component, status=dto.status.value)
    return _respond(dto, dto.status)
