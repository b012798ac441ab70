"""Content resolver - tiered lookup with write-through caching."""

import asyncio
from collections.abc import Iterable
from typing import Any

from loguru import logger

from app.models.common import Resolved, Result, Source
from app.models.content import NOT_FOUND, EntityType, content_key
from app.repositories.bundled import BundledRepository
from app.repositories.common import CacheRepository
from app.services.resolver.policy import EntityPolicy, default_policies
from app.services.resolver.tiers import BundledTier, MemoryTier, MockTier, PersistentTier, RemoteTier, Tier
from content_client import ContentClient


class ContentResolver:
    """Resolves (entity type, scope id) through memory, cache, remote, bundled and mock tiers.

    The first tier with a hit wins. A remote hit is written through to the
    persistent cache; every hit except a mock one is kept in memory. Bundled
    content is never written to the persistent cache, so remote content takes
    over again once it is reachable. ``resolve`` never raises: the mock tier
    always answers, and the returned source tells callers whether a fallback
    happened.
    """

    def __init__(
        self,
        cache: CacheRepository,
        client: ContentClient,
        bundled: BundledRepository,
        policies: dict[EntityType, EntityPolicy] | None = None,
        dedupe_inflight: bool = True,
    ):
        self._cache = cache
        self._client = client
        self._bundled = bundled
        self._policies = policies or default_policies()
        self._dedupe = dedupe_inflight
        self._memory = MemoryTier()
        self._remote = RemoteTier(client, bundled)
        self._tiers: tuple[Tier, ...] = (
            self._memory,
            PersistentTier(cache),
            self._remote,
            BundledTier(bundled),
            MockTier(),
        )
        self._inflight: dict[tuple[EntityType, str, float | None], asyncio.Future] = {}

    @property
    def tiers(self) -> tuple[Tier, ...]:
        """Tiers in the order they are tried."""
        return self._tiers

    def policy(self, entity_type: EntityType | str) -> EntityPolicy:
        return self._policies[EntityType(entity_type)]

    async def resolve(
        self,
        entity_type: EntityType | str,
        scope_id: str,
        ttl_seconds: float | None = None,
    ) -> Resolved:
        """Resolve one entity. Concurrent calls for the same key and TTL share one walk.

        An entity type without a policy resolves to the NOT_FOUND sentinel
        from the mock tier.
        """
        try:
            policy = self.policy(entity_type)
        except (KeyError, ValueError):
            logger.warning("No policy for entity type {!r}, scope {}", entity_type, scope_id)
            return Resolved(payload=NOT_FOUND, source=Source.MOCK)
        if not self._dedupe:
            return await self._walk(policy, scope_id, ttl_seconds)

        key = (policy.entity_type, scope_id, ttl_seconds)
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._walk(policy, scope_id, ttl_seconds))
            self._inflight[key] = task
            task.add_done_callback(lambda _: self._inflight.pop(key, None))
        return await asyncio.shield(task)

    async def _walk(self, policy: EntityPolicy, scope_id: str, ttl_seconds: float | None) -> Resolved:
        name = policy.entity_type.value
        for tier in self._tiers:
            try:
                result = await tier.lookup(policy, scope_id)
            except Exception as e:
                logger.warning("{} tier failed for {} {}: {}", tier.source.value, name, scope_id, e)
                continue

            if result.is_ok:
                await self._remember(tier.source, policy, scope_id, result.value, ttl_seconds)
                logger.debug("Resolved {} {} from {}", name, scope_id, tier.source.value)
                return Resolved(payload=result.value, source=tier.source)

            if result.detail:
                logger.debug("{} miss for {} {}: {}", tier.source.value, name, scope_id, result.detail)

        # MockTier always answers; reaching here means it raised
        logger.error("No tier answered for {} {}", name, scope_id)
        return Resolved(payload=None, source=Source.MOCK)

    async def _remember(
        self,
        source: Source,
        policy: EntityPolicy,
        scope_id: str,
        payload: Any,
        ttl_seconds: float | None,
    ) -> None:
        if source is Source.REMOTE:
            ttl = policy.ttl_seconds if ttl_seconds is None else ttl_seconds
            await self._cache.set(content_key(policy.entity_type, scope_id), payload, ttl)
        if source not in (Source.MEMORY, Source.MOCK):
            self._memory.put(policy.entity_type, scope_id, payload)

    async def refresh(self, entity_type: EntityType | str, scope_id: str) -> Result:
        """Fetch from remote and write through to the persistent cache only.

        The memory tier is left untouched, so a running session keeps what it
        already showed until the next restart or invalidation.
        """
        policy = self.policy(entity_type)
        result = await self._remote.lookup(policy, scope_id)
        if not result.is_ok:
            return result
        stored = await self.store(policy.entity_type, scope_id, result.value)
        if not stored.is_ok:
            return stored
        return result

    async def store(self, entity_type: EntityType | str, scope_id: str, payload: Any) -> Result:
        """Write an already normalized payload to the persistent cache with the policy TTL."""
        policy = self.policy(entity_type)
        return await self._cache.set(content_key(policy.entity_type, scope_id), payload, policy.ttl_seconds)

    async def prefetch(self, entity_type: EntityType | str, scope_ids: Iterable[str]) -> list[Resolved]:
        """Resolve many entities of one type concurrently."""
        return list(await asyncio.gather(*(self.resolve(entity_type, s) for s in scope_ids)))

    async def invalidate(self, entity_type: EntityType | str, scope_id: str) -> None:
        entity_type = EntityType(entity_type)
        self._memory.discard(entity_type, scope_id)
        await self._cache.remove(content_key(entity_type, scope_id))

    async def clear_cache(self) -> int:
        """Drop the memory tier and every persistent cache entry."""
        self._memory.clear()
        return await self._cache.clear_all()

    async def dispose(self) -> None:
        for task in list(self._inflight.values()):
            task.cancel()
        self._inflight.clear()
        self._memory.clear()
