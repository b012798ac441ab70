"""Cache repository - namespaced TTL entries in the key/value store."""

import time
from collections.abc import Callable
from typing import Any

from loguru import logger
from pydantic import ValidationError

from app.errors import StorageError
from app.models.common import CacheEntry, ErrorKind, Result
from app.repositories.base import BaseRepository
from app.repositories.kv_store import KeyValueStore
from settings import CACHE_NAMESPACE


class CacheRepository(BaseRepository):
    """Repository for cached content entries.

    Entries expire lazily: an expired entry is deleted when read, never on
    write, and there is no background sweep. Storage and parse failures are
    logged and reported as misses or error results, never raised.
    """

    def __init__(
        self,
        store: KeyValueStore,
        namespace: str = CACHE_NAMESPACE,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(store)
        self._namespace = namespace
        self._clock = clock

    @property
    def namespace(self) -> str:
        return self._namespace

    def namespaced(self, key: str) -> str:
        return f"{self._namespace}{key}"

    def owns(self, raw_key: str) -> bool:
        """True for keys inside this cache's namespace."""
        return raw_key.startswith(self._namespace)

    async def set(self, key: str, payload: Any, ttl_seconds: float) -> Result:
        """Store payload under key, replacing any previous entry."""
        try:
            entry = CacheEntry(payload=payload, stored_at=self._clock(), ttl_seconds=ttl_seconds)
            serialized = entry.dumps()
        except ValueError as e:
            logger.warning("Cache entry not serializable: key={}, {}", key, e)
            return Result.err(ErrorKind.PARSE, str(e))

        try:
            await self._store.set(self.namespaced(key), serialized)
        except StorageError as e:
            logger.warning("Cache write failed: key={}, {}", key, e.message)
            return Result.from_exception(e)

        logger.debug("Cache saved: key={}, ttl={}s", key, ttl_seconds)
        return Result.ok(True)

    async def get(self, key: str) -> Any | None:
        """Return the payload, or None when missing, unreadable or expired."""
        raw_key = self.namespaced(key)
        try:
            raw = await self._store.get(raw_key)
        except StorageError as e:
            logger.warning("Cache read failed: key={}, {}", key, e.message)
            return None
        if raw is None:
            return None

        try:
            entry = CacheEntry.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Corrupt cache entry ignored: key={}, {} error(s)", key, e.error_count())
            return None

        if not entry.is_valid(self._clock()):
            logger.debug("Cache expired: key={}", key)
            await self._delete(raw_key)
            return None

        logger.debug("Cache hit: key={}", key)
        return entry.payload

    async def remove(self, key: str) -> None:
        await self._delete(self.namespaced(key))

    async def keys(self) -> list[str]:
        """Keys inside the namespace, without the prefix."""
        try:
            raw_keys = await self._store.keys()
        except StorageError as e:
            logger.warning("Cache key listing failed: {}", e.message)
            return []
        return [k[len(self._namespace) :] for k in raw_keys if self.owns(k)]

    async def clear_all(self, predicate: Callable[[str], bool] | None = None) -> int:
        """Delete namespaced entries (optionally only those matching predicate).

        Keys outside the namespace are never touched. Returns the count removed.
        """
        try:
            raw_keys = await self._store.keys()
            doomed = [k for k in raw_keys if self.owns(k) and (predicate is None or predicate(k))]
            if doomed:
                await self._store.multi_remove(doomed)
        except StorageError as e:
            logger.warning("Cache clear failed: {}", e.message)
            return 0
        logger.info("Cache cleared: {} entries", len(doomed))
        return len(doomed)

    async def size(self) -> int:
        """Total serialized length of namespaced entries."""
        total = 0
        try:
            for raw_key in await self._store.keys():
                if not self.owns(raw_key):
                    continue
                value = await self._store.get(raw_key)
                if value:
                    total += len(value)
        except StorageError as e:
            logger.warning("Cache size failed: {}", e.message)
            return 0
        return total

    async def _delete(self, raw_key: str) -> None:
        try:
            await self._store.remove(raw_key)
        except StorageError as e:
            logger.warning("Cache delete failed: key={}, {}", raw_key, e.message)
