"""
Health Gateway Interface - Domain Layer

Contract used by the observers to reach the health API over the network.
"""

from abc import ABC, abstractmethod

from wander.domain.entities.health import HealthState


class IHealthGateway(ABC):
    """Interface for the health API gateway."""

    @abstractmethod
    async def fetch_health(self) -> HealthState:
        """
        Retrieve the composite health state.

        Returns:
            HealthState: Parsed composite status

        Raises:
            HealthGatewayError: If the API cannot be reached or the body
                cannot be decoded
        """
        pass

    @abstractmethod
    async def probe(self, url: str) -> bool:
        """
        Issue a single bounded request.

        Args:
            url: Absolute URL to request

        Returns:
            bool: True if a success response arrived in time
        """
        pass
