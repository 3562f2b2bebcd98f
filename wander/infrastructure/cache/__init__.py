"""Cache module for infrastructure layer."""

from .redis_cache import RedisCache

__all__ = ["RedisCache"]
