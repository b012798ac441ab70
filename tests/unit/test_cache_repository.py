"""Tests for the TTL cache repository."""

import json

import pytest
from conftest import FailingStore

from app.models.common import ErrorKind
from app.repositories import CacheRepository, MemoryKeyValueStore


@pytest.mark.asyncio
class TestGetSet:
    async def test_round_trip(self, cache, store):
        assert (await cache.set("k", {"a": 1}, 60)).is_ok
        assert await cache.get("k") == {"a": 1}
        assert "ns_cache_k" in await store.keys()

    async def test_missing_key(self, cache):
        assert await cache.get("nope") is None

    async def test_entry_format(self, cache, store, clock):
        await cache.set("k", [1, 2], 30)
        raw = json.loads(await store.get("ns_cache_k"))
        assert raw == {"payload": [1, 2], "storedAt": clock.now, "ttlSeconds": 30}

    async def test_overwrites(self, cache):
        await cache.set("k", "old", 60)
        await cache.set("k", "new", 60)
        assert await cache.get("k") == "new"


@pytest.mark.asyncio
class TestExpiry:
    async def test_valid_at_exact_ttl(self, cache, clock):
        await cache.set("k", "v", 60)
        clock.advance(60)
        assert await cache.get("k") == "v"

    async def test_expired_entry_deleted_on_read(self, cache, store, clock):
        await cache.set("k", "v", 60)
        clock.advance(61)
        assert "ns_cache_k" in await store.keys()
        assert await cache.get("k") is None
        assert "ns_cache_k" not in await store.keys()

    async def test_backdated_entry(self, clock):
        stale = {"payload": "v", "storedAt": clock.now - 3601, "ttlSeconds": 3600}
        store = MemoryKeyValueStore({"ns_cache_k": json.dumps(stale)})
        cache = CacheRepository(store, namespace="ns_cache_", clock=clock)
        assert await cache.get("k") is None
        assert await store.keys() == []

    async def test_write_never_evicts(self, cache, store, clock):
        await cache.set("old", "v", 1)
        clock.advance(10)
        await cache.set("new", "v", 60)
        assert "ns_cache_old" in await store.keys()


@pytest.mark.asyncio
class TestFailures:
    async def test_corrupt_entry_is_miss(self, clock):
        store = MemoryKeyValueStore({"ns_cache_k": "not json", "ns_cache_j": '{"payload": 1}'})
        cache = CacheRepository(store, namespace="ns_cache_", clock=clock)
        assert await cache.get("k") is None
        assert await cache.get("j") is None

    async def test_storage_errors_absorbed(self, clock):
        cache = CacheRepository(FailingStore(), namespace="ns_cache_", clock=clock)
        result = await cache.set("k", "v", 60)
        assert result.error is ErrorKind.STORAGE
        assert await cache.get("k") is None
        assert await cache.clear_all() == 0
        assert await cache.size() == 0
        assert await cache.keys() == []
        await cache.remove("k")

    async def test_unserializable_payload(self, cache):
        result = await cache.set("k", object(), 60)
        assert result.error is ErrorKind.PARSE


@pytest.mark.asyncio
class TestNamespace:
    async def test_clear_all_only_namespace(self, clock):
        store = MemoryKeyValueStore({"ns_cache_a": "1", "ns_cache_b": "2", "other_key": "3"})
        cache = CacheRepository(store, namespace="ns_cache_", clock=clock)
        assert await cache.clear_all() == 2
        assert await store.keys() == ["other_key"]

    async def test_clear_with_predicate(self, clock):
        store = MemoryKeyValueStore({"ns_cache_a": "1", "ns_cache_b": "2", "other_a": "3"})
        cache = CacheRepository(store, namespace="ns_cache_", clock=clock)
        assert await cache.clear_all(lambda k: k.endswith("a")) == 1
        assert sorted(await store.keys()) == ["ns_cache_b", "other_a"]

    async def test_keys_strip_prefix(self, cache, store):
        await store.set("unrelated", "x")
        await cache.set("a", 1, 60)
        assert await cache.keys() == ["a"]

    async def test_size_counts_namespace_only(self, cache, store):
        await store.set("unrelated", "x" * 100)
        await cache.set("a", 1, 60)
        assert await cache.size() == len(await store.get("ns_cache_a"))
