"""Shared fixtures: in-memory store, fake clock and a routed mock transport."""

import json

import httpx
import pytest
import pytest_asyncio

from app.errors import StorageError
from app.repositories import BundledRepository, CacheRepository, MemoryKeyValueStore
from app.services.resolver import ContentResolver
from content_client import ContentClient

BASE_URL = "https://content.test"


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FailingStore(MemoryKeyValueStore):
    """Store whose every operation raises StorageError."""

    async def get(self, key):
        raise StorageError("store offline")

    async def set(self, key, value):
        raise StorageError("store offline")

    async def remove(self, key):
        raise StorageError("store offline")

    async def keys(self):
        raise StorageError("store offline")

    async def multi_remove(self, keys):
        raise StorageError("store offline")


def json_body(data) -> tuple[int, str]:
    return 200, json.dumps(data)


def make_transport(routes: dict, calls: list) -> httpx.MockTransport:
    """Serve routes keyed by URL path: (status, body) or an httpx exception class."""

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, type) and issubclass(route, Exception):
            raise route("simulated failure", request=request)
        status, body = route
        return httpx.Response(status, text=body)

    return httpx.MockTransport(handler)


CATEGORIES_DOC = {
    "categories": [
        {
            "id": "cicd",
            "name": "CI/CD & DevOps",
            "description": "Pipelines",
            "icon": "🚀",
            "path": "cicd",
            "order": 1,
        }
    ]
}


@pytest.fixture
def routes() -> dict:
    return {}


@pytest.fixture
def calls() -> list:
    return []


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def cache(store, clock) -> CacheRepository:
    return CacheRepository(store, namespace="ns_cache_", clock=clock)


@pytest.fixture
def bundled() -> BundledRepository:
    return BundledRepository()


@pytest_asyncio.fixture
async def client(routes, calls):
    client = ContentClient(base_url=BASE_URL, backoff=0, transport=make_transport(routes, calls))
    yield client
    await client.close()


@pytest.fixture
def resolver(cache, client, bundled) -> ContentResolver:
    return ContentResolver(cache=cache, client=client, bundled=bundled)
