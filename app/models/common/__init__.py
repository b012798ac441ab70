"""Common models - results, cache entries and shared tables."""

from app.models.common.base import BaseEntity
from app.models.common.cache import KV_STORE_DDL, CacheEntry
from app.models.common.result import ErrorKind, Resolved, Result, Source

__all__ = [
    "BaseEntity",
    "CacheEntry",
    "KV_STORE_DDL",
    "ErrorKind",
    "Resolved",
    "Result",
    "Source",
]
