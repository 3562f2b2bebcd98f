"""
Domain Errors

Custom error classes raised across the health subsystem.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UnknownComponentError(DomainError):
    """Raised when no probe is registered under the requested key."""

    def __init__(self, component: str, details: Optional[Dict[str, Any]] = None):
        message = f"Component '{component}' is not registered"
        super().__init__(message, details)
        self.component = component


class HealthGatewayError(DomainError):
    """Raised when the health API cannot be reached or answers garbage."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
