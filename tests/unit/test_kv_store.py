"""Tests for key/value store backends."""

import pytest

from app.errors import StorageError
from app.repositories import DuckDBKeyValueStore, MemoryKeyValueStore, create_store


@pytest.mark.asyncio
class TestDuckDBStore:
    async def test_set_get(self, tmp_path):
        store = DuckDBKeyValueStore(str(tmp_path / "kv.duckdb"))
        await store.set("a", "1")
        await store.set("a", "2")
        assert await store.get("a") == "2"
        assert await store.get("missing") is None
        await store.close()

    async def test_keys_and_removal(self, tmp_path):
        store = DuckDBKeyValueStore(str(tmp_path / "kv.duckdb"))
        for key in ("a", "b", "c"):
            await store.set(key, key)
        await store.remove("a")
        await store.multi_remove(["b"])
        await store.multi_remove([])
        assert await store.keys() == ["c"]
        await store.close()

    async def test_persists_across_connections(self, tmp_path):
        path = str(tmp_path / "nested" / "kv.duckdb")
        store = DuckDBKeyValueStore(path)
        await store.set("k", "v")
        await store.close()
        reopened = DuckDBKeyValueStore(path)
        assert await reopened.get("k") == "v"
        await reopened.close()

    async def test_errors_become_storage_errors(self, tmp_path):
        path = tmp_path / "not-a-db.duckdb"
        path.write_text("garbage", encoding="utf-8")
        store = DuckDBKeyValueStore(str(path))
        with pytest.raises(StorageError):
            await store.get("k")


@pytest.mark.asyncio
class TestMemoryStore:
    async def test_basic(self):
        store = MemoryKeyValueStore({"x": "1"})
        await store.set("y", "2")
        await store.multi_remove(["x", "missing"])
        assert await store.keys() == ["y"]


class TestFactory:
    def test_backends(self, tmp_path):
        assert isinstance(create_store("memory"), MemoryKeyValueStore)
        assert isinstance(create_store("duckdb", str(tmp_path / "x.duckdb")), DuckDBKeyValueStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_store("redis")
