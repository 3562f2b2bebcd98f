"""Use cases for the health endpoints."""

from wander.application.dtos.health_dto import (
    ApiIndexDTO,
    ComponentHealthDTO,
    HealthResponseDTO,
)
from wander.domain.ports.health_check import IHealthCheckService


class GetHealthStatusUseCase:
    """Use case responsible for returning the composite health status."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> HealthResponseDTO:
        state = await self._health_check_service.evaluate()
        return HealthResponseDTO.from_domain(state)


class GetComponentHealthUseCase:
    """Use case responsible for reading a single component."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self, component: str) -> ComponentHealthDTO:
        """
        Raises:
            UnknownComponentError: If no probe answers to ``component``
        """
        health = await self._health_check_service.check_component(component)
        return ComponentHealthDTO.from_domain(health)


class GetApiIndexUseCase:
    """Use case describing the API root."""

    def __init__(
        self, health_check_service: IHealthCheckService, title: str, version: str
    ) -> None:
        self._health_check_service = health_check_service
        self._title = title
        self._version = version

    def execute(self) -> ApiIndexDTO:
        return ApiIndexDTO.build(
            self._title, self._version, list(self._health_check_service.component_slugs)
        )
