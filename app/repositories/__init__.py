"""Repositories package - data access layer for cached and bundled content."""

from app.repositories.base import BaseRepository
from app.repositories.bundled import BundledRepository
from app.repositories.common import CacheRepository
from app.repositories.db import connect, init_tables
from app.repositories.journey import JourneyRepository
from app.repositories.kv_store import (
    DuckDBKeyValueStore,
    KeyValueStore,
    MemoryKeyValueStore,
    create_store,
)

__all__ = [
    # DB
    "connect",
    "init_tables",
    # Stores
    "KeyValueStore",
    "DuckDBKeyValueStore",
    "MemoryKeyValueStore",
    "create_store",
    # Base
    "BaseRepository",
    # Content
    "CacheRepository",
    "BundledRepository",
    "JourneyRepository",
]
