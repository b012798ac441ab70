"""Persistent key/value stores shared by the cache and other app state."""

import asyncio
import threading
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any, Protocol

import duckdb
from loguru import logger

from app.errors import StorageError
from app.repositories.db import connect
from settings import DB_PATH


class KeyValueStore(Protocol):
    """Async string store. Every method may raise StorageError."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def remove(self, key: str) -> None: ...

    async def keys(self) -> list[str]: ...

    async def multi_remove(self, keys: Iterable[str]) -> None: ...

    async def close(self) -> None: ...


class MemoryKeyValueStore:
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    async def keys(self) -> list[str]:
        return list(self._data)

    async def multi_remove(self, keys: Iterable[str]) -> None:
        for key in list(keys):
            self._data.pop(key, None)

    async def close(self) -> None:
        pass


class DuckDBKeyValueStore:
    """Store backed by the kv_store table of a DuckDB file.

    Queries run in a worker thread; one connection is shared and guarded by a lock.
    """

    def __init__(self, path: str = DB_PATH):
        self._path = path
        self._conn: duckdb.DuckDBPyConnection | None = None
        self._lock = threading.Lock()

    def _connection(self) -> duckdb.DuckDBPyConnection:
        if self._conn is None:
            self._conn = connect(self._path)
        return self._conn

    def _locked(self, fn: Callable[[duckdb.DuckDBPyConnection], Any]) -> Any:
        with self._lock:
            return fn(self._connection())

    async def _run(self, fn: Callable[[duckdb.DuckDBPyConnection], Any]) -> Any:
        try:
            return await asyncio.to_thread(self._locked, fn)
        except duckdb.Error as e:
            raise StorageError(f"{self._path}: {e}") from e

    async def get(self, key: str) -> str | None:
        row = await self._run(
            lambda conn: conn.execute("SELECT value FROM kv_store WHERE key = ?", [key]).fetchone()
        )
        return row[0] if row else None

    async def set(self, key: str, value: str) -> None:
        await self._run(
            lambda conn: conn.execute(
                "INSERT OR REPLACE INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)",
                [key, value, datetime.now()],
            )
        )

    async def remove(self, key: str) -> None:
        await self._run(lambda conn: conn.execute("DELETE FROM kv_store WHERE key = ?", [key]))

    async def keys(self) -> list[str]:
        rows = await self._run(lambda conn: conn.execute("SELECT key FROM kv_store").fetchall())
        return [r[0] for r in rows]

    async def multi_remove(self, keys: Iterable[str]) -> None:
        params = [[k] for k in keys]
        if not params:
            return
        await self._run(lambda conn: conn.executemany("DELETE FROM kv_store WHERE key = ?", params))

    async def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("DB connection closed: {}", self._path)


def create_store(backend: str, path: str = DB_PATH) -> KeyValueStore:
    """Build the configured store backend ("duckdb" or "memory")."""
    if backend == "memory":
        return MemoryKeyValueStore()
    if backend == "duckdb":
        return DuckDBKeyValueStore(path)
    raise ValueError(f"Unknown store backend: {backend}")
