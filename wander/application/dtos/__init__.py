"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .health_dto import ApiIndexDTO, ComponentHealthDTO, HealthResponseDTO

__all__ = ["HealthResponseDTO", "ComponentHealthDTO", "ApiIndexDTO"]
