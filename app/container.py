"""Dependency Injection container - built once at app startup and passed to consumers."""

from loguru import logger

from app.repositories.bundled import BundledRepository
from app.repositories.common import CacheRepository
from app.repositories.journey import JourneyRepository
from app.repositories.kv_store import KeyValueStore, create_store
from app.services.content import ContentService
from app.services.resolver import ContentResolver
from app.services.update import UpdateChecker
from content_client import ContentClient
from settings import (
    AUTO_APPLY_UPDATES,
    CACHE_NAMESPACE,
    CONTENT_BASE_URL,
    DB_PATH,
    STORE_BACKEND,
    UPDATE_CHECK_DELAY,
)


class Container:
    """Application container - owns every content component and their lifecycle."""

    def __init__(
        self,
        store: KeyValueStore | None = None,
        client: ContentClient | None = None,
        bundled: BundledRepository | None = None,
        store_backend: str = STORE_BACKEND,
        db_path: str = DB_PATH,
        namespace: str = CACHE_NAMESPACE,
        base_url: str = CONTENT_BASE_URL,
        update_check_delay: float | None = UPDATE_CHECK_DELAY,
        auto_apply_updates: bool = AUTO_APPLY_UPDATES,
    ):
        # Storage
        self.store = store if store is not None else create_store(store_backend, db_path)
        self.cache = CacheRepository(self.store, namespace=namespace)
        self.journey = JourneyRepository(self.store)

        # Sources
        self.client = client if client is not None else ContentClient(base_url=base_url)
        self.bundled = bundled if bundled is not None else BundledRepository()

        # Services (with injected repos)
        self.resolver = ContentResolver(cache=self.cache, client=self.client, bundled=self.bundled)
        self.content = ContentService(self.resolver)
        self.updates = UpdateChecker(
            resolver=self.resolver,
            client=self.client,
            store=self.store,
            bundled=self.bundled,
        )

        self._update_check_delay = update_check_delay
        self._auto_apply_updates = auto_apply_updates
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def init(self) -> None:
        """Open connections and schedule the launch update check. Idempotent."""
        if self._initialized:
            return
        await self.client.open()
        if self._update_check_delay is not None:
            self.updates.start(self._update_check_delay, auto_apply=self._auto_apply_updates)
        self._initialized = True
        logger.info("Container initialized")

    async def dispose(self) -> None:
        """Cancel background work and release connections."""
        if not self._initialized:
            return
        await self.updates.stop()
        await self.resolver.dispose()
        await self.client.close()
        await self.store.close()
        self._initialized = False
        logger.info("Container disposed")

    async def __aenter__(self):
        await self.init()
        return self

    async def __aexit__(self, *_):
        await self.dispose()
