"""
Main module - Main/Composition Root Layer

Entry points of the project: the FastAPI application and the command line.

Its primary responsibilities include:
- Loading settings from the environment
- Wiring resources, probes and use cases (Composition Root)
- Starting the API server and the observers
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
