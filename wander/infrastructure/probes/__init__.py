"""Dependency probes - Infrastructure layer."""

from .postgres_probe import PostgresProbe
from .redis_probe import RedisProbe

__all__ = ["PostgresProbe", "RedisProbe"]
