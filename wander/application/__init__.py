"""
Application Layer Package

Use cases serving the health endpoints and the observer services that
consume them.
"""

from wander.application import dtos, services, use_cases

__all__ = ["dtos", "services", "use_cases"]
