"""Common repositories - content cache."""

from app.repositories.common.cache import CacheRepository

__all__ = [
    "CacheRepository",
]
