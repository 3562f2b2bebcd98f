"""
Controllers Package - Presentation Layer

FastAPI routers mapping HTTP requests onto the health use cases.
"""

from .system_controller import api_router as system_api_router
from .system_controller import router as system_router

__all__ = ["system_router", "system_api_router"]
