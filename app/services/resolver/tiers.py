"""Resolution tiers, tried in order until one yields a definitive hit."""

from typing import Any, Protocol

from loguru import logger

from app.errors import ContentError
from app.models.common import ErrorKind, Result, Source
from app.models.content import EntityType, content_key
from app.repositories.bundled import BundledRepository
from app.repositories.common import CacheRepository
from app.services.resolver.policy import EntityPolicy
from content_client import ContentClient


class Tier(Protocol):
    source: Source

    async def lookup(self, policy: EntityPolicy, scope_id: str) -> Result: ...


class MemoryTier:
    """Process-lifetime map; entries are dropped only by explicit invalidation."""

    source = Source.MEMORY

    def __init__(self):
        self._entries: dict[tuple[EntityType, str], Any] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def lookup(self, policy: EntityPolicy, scope_id: str) -> Result:
        key = (policy.entity_type, scope_id)
        if key in self._entries:
            return Result.ok(self._entries[key])
        return Result.err(ErrorKind.NOT_FOUND)

    def put(self, entity_type: EntityType, scope_id: str, payload: Any) -> None:
        self._entries[(entity_type, scope_id)] = payload

    def discard(self, entity_type: EntityType, scope_id: str) -> None:
        self._entries.pop((entity_type, scope_id), None)

    def clear(self) -> None:
        self._entries.clear()


class PersistentTier:
    source = Source.PERSISTENT

    def __init__(self, cache: CacheRepository):
        self._cache = cache

    async def lookup(self, policy: EntityPolicy, scope_id: str) -> Result:
        payload = await self._cache.get(content_key(policy.entity_type, scope_id))
        if payload is None:
            return Result.err(ErrorKind.NOT_FOUND)
        return Result.ok(payload)


class RemoteTier:
    source = Source.REMOTE

    def __init__(self, client: ContentClient, bundled: BundledRepository):
        self._client = client
        self._bundled = bundled

    async def lookup(self, policy: EntityPolicy, scope_id: str) -> Result:
        fetched = await policy.fetch(self._client, self._bundled, scope_id)
        if not fetched.is_ok:
            return fetched
        try:
            return Result.ok(policy.normalize(fetched.value))
        except ContentError as e:
            logger.warning("Remote {} {} rejected: {}", policy.entity_type.value, scope_id, e.message)
            return Result.from_exception(e)


class BundledTier:
    source = Source.BUNDLED

    def __init__(self, bundled: BundledRepository):
        self._bundled = bundled

    async def lookup(self, policy: EntityPolicy, scope_id: str) -> Result:
        found = self._bundled.lookup(policy.entity_type, scope_id)
        if not found.is_ok:
            return found
        try:
            return Result.ok(policy.normalize(found.value))
        except ContentError as e:
            logger.error("Bundled {} {} is invalid: {}", policy.entity_type.value, scope_id, e.message)
            return Result.from_exception(e)


class MockTier:
    source = Source.MOCK

    async def lookup(self, policy: EntityPolicy, scope_id: str) -> Result:
        return Result.ok(policy.mock(scope_id))
