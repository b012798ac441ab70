"""Journey repository - questionnaire navigation state."""

from loguru import logger
from pydantic import ValidationError

from app.errors import StorageError
from app.models.content import QuestionnaireState
from app.repositories.base import BaseRepository
from app.repositories.kv_store import KeyValueStore
from settings import JOURNEY_KEY


class JourneyRepository(BaseRepository):
    """Persists the in-progress journey under a single key outside the cache namespace."""

    def __init__(self, store: KeyValueStore, key: str = JOURNEY_KEY):
        super().__init__(store)
        self._key = key

    async def save(self, state: QuestionnaireState) -> bool:
        try:
            await self._store.set(self._key, state.model_dump_json(by_alias=True))
        except StorageError as e:
            logger.warning("Error saving journey: {}", e.message)
            return False
        logger.debug("Journey saved at block {}", state.current_block_id)
        return True

    async def load(self) -> QuestionnaireState | None:
        try:
            raw = await self._store.get(self._key)
        except StorageError as e:
            logger.warning("Error loading journey: {}", e.message)
            return None
        if raw is None:
            return None
        try:
            return QuestionnaireState.model_validate_json(raw)
        except ValidationError:
            logger.warning("Stored journey is unreadable, ignoring it")
            return None

    async def clear(self) -> None:
        try:
            await self._store.remove(self._key)
        except StorageError as e:
            logger.warning("Error clearing journey: {}", e.message)
