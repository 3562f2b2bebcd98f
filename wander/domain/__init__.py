"""
Domain Layer Package

Health value objects, probe and aggregator ports, and gateway contracts.
No framework or infrastructure dependencies live here.
"""

from wander.domain import entities, gateways, ports

__all__ = ["entities", "gateways", "ports"]
