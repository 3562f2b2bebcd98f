"""Database module for infrastructure layer."""

from .postgres_database import PostgresDatabase

__all__ = ["PostgresDatabase"]
