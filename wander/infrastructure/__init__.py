"""
Infrastructure Layer Package

Implementations of the domain ports: the PostgreSQL and Redis resources,
the dependency probes, the health aggregator and the HTTP gateway used by
the observers.
"""

from wander.infrastructure import cache, database, gateways, probes, services

__all__ = ["cache", "database", "gateways", "probes", "services"]
