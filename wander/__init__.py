"""
Wander Health Root Module

Health aggregation and polling for the Wander development stack.

Layer Structure:
- Domain: Health value objects, probe and gateway contracts, errors
- Application: DTOs, use cases and the observer services (monitor, waiter)
- Infrastructure: PostgreSQL/Redis resources, probes, aggregator, HTTP gateway
- Presentation: FastAPI controllers and the Typer command line
- Shared: Cross-cutting concerns such as logging and constants
- Main: Composition root, settings and entry points
"""

__version__ = "1.0.0"
