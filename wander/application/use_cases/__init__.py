"""
Use Cases Package - Application Layer

Application-specific operations invoked by the presentation layer.
"""

from .health_use_cases import (
    GetApiIndexUseCase,
    GetComponentHealthUseCase,
    GetHealthStatusUseCase,
)

__all__ = [
    "GetHealthStatusUseCase",
    "GetComponentHealthUseCase",
    "GetApiIndexUseCase",
]
