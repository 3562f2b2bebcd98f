"""Health API gateway implementation - Infrastructure layer."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

import httpx

from wander.domain.entities.errors import HealthGatewayError
from wander.domain.entities.health import ComponentStatus, HealthState, HealthStatus
from wander.domain.gateways.health_gateway import IHealthGateway
from wander.shared import get_logger

logger = get_logger(__name__)


class HealthApiGateway(IHealthGateway):
    """HTTP client for the health endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        health_path: str = "/health",
    ):
        """
        Initialize the health API gateway.

        Args:
            base_url: Base URL of the API, e.g. ``http://localhost:8080``
            timeout: Per-request timeout in seconds
            health_path: Path of the composite endpoint
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.health_url = f"{self.base_url}/{health_path.lstrip('/')}"

    async def fetch_health(self) -> HealthState:
        """
        Retrieve and parse the composite health state.

        The body is parsed for both 200 and 503 answers since the API
        reports unhealthy states with a payload.

        Raises:
            HealthGatewayError: If the API is unreachable or the body is not
                a JSON object
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.health_url)
        except httpx.RequestError as exc:
            logger.debug("health_api.request.failed", url=self.health_url, error=str(exc))
            raise HealthGatewayError(
                f"Health API request failed: {exc}", details={"url": self.health_url}
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise HealthGatewayError(
                f"Health API returned a non-JSON body (HTTP {response.status_code})",
                details={"url": self.health_url, "status_code": response.status_code},
            ) from exc

        if not isinstance(payload, Mapping):
            raise HealthGatewayError(
                "Health API returned an unexpected payload",
                details={"url": self.health_url, "status_code": response.status_code},
            )

        logger.debug(
            "health_api.response",
            status_code=response.status_code,
            status=payload.get("status"),
        )
        return self._to_domain(payload)

    async def probe(self, url: str) -> bool:
        """Issue one bounded GET; True iff it answered with a 2xx status."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            logger.debug("health_api.probe.unreachable", url=url, error=str(exc))
            return False

        logger.debug("health_api.probe.response", url=url, status_code=response.status_code)
        return response.is_success

    def _to_domain(self, payload: Mapping[str, Any]) -> HealthState:
        timestamp = self._parse_timestamp(payload.get("timestamp"))

        error = payload.get("error")
        if error:
            # Older servers reported aggregation faults as "unhealthy" + error.
            return HealthState.failed(str(error), timestamp=timestamp)

        overall = HealthStatus.parse(payload.get("status"))
        if overall is HealthStatus.ERROR:
            return HealthState.failed("Unknown error", timestamp=timestamp)

        components: Optional[Dict[str, ComponentStatus]] = None
        services = payload.get("services")
        if isinstance(services, Mapping):
            components = {
                str(name): ComponentStatus.parse(value)
                for name, value in services.items()
            }

        try:
            return HealthState(overall=overall, timestamp=timestamp, components=components)
        except ValueError as exc:
            raise HealthGatewayError(
                f"Health API returned an inconsistent payload: {exc}",
                details={"url": self.health_url},
            ) from exc

    @staticmethod
    def _parse_timestamp(value: Any) -> datetime:
        if isinstance(value, str) and value:
            try:
                parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                parsed = None
            if parsed is not None:
                if parsed.tzinfo is None:
                    parsed = parsed.replace(tzinfo=timezone.utc)
                return parsed
        return datetime.now(timezone.utc)
