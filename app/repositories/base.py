"""Base repository class."""

from loguru import logger

from app.repositories.kv_store import KeyValueStore


class BaseRepository:
    """Base repository over a shared key/value store."""

    def __init__(self, store: KeyValueStore):
        self._store = store
        logger.debug("{} initialized", self.__class__.__name__)

    @property
    def store(self) -> KeyValueStore:
        return self._store
