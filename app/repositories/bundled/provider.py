"""Bundled content repository - read-only defaults shipped with the app."""

import copy
import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from loguru import logger

from app.models.common import ErrorKind, Result
from app.models.content import EntityType, questionnaire_scope
from app.repositories.bundled.registry import BUNDLED_FILES, CATEGORY_QUESTIONNAIRES, DATA_DIR


class BundledRepository:
    """Always-available content loaded once from the bundled data directory.

    Lookups never touch network or storage; an absent key is a NOT_FOUND
    result, never an exception.
    """

    def __init__(
        self,
        data_dir: Path = DATA_DIR,
        files: Mapping[tuple[EntityType, str], str] = BUNDLED_FILES,
        index: Mapping[str, tuple[str, ...]] = CATEGORY_QUESTIONNAIRES,
    ):
        self._index = MappingProxyType({k: tuple(v) for k, v in index.items()})
        self._content = MappingProxyType(self._load(data_dir, files))
        logger.debug("{} loaded {} entries", self.__class__.__name__, len(self._content))

    @staticmethod
    def _load(data_dir: Path, files: Mapping[tuple[EntityType, str], str]) -> dict[tuple[EntityType, str], Any]:
        content = {}
        for (entity_type, scope_id), rel_path in files.items():
            path = data_dir / rel_path
            try:
                content[(EntityType(entity_type), scope_id)] = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                logger.error("Bundled content unreadable, skipping {}: {}", path, e)
        return content

    def questionnaire_ids(self, category_path: str) -> tuple[str, ...]:
        """Questionnaire ids known for a category."""
        return self._index.get(category_path, ())

    def category_paths(self) -> tuple[str, ...]:
        return tuple(self._index)

    def lookup(self, entity_type: EntityType | str, scope_id: str) -> Result:
        """Return a copy of the bundled payload, or a NOT_FOUND result."""
        entity_type = EntityType(entity_type)

        if entity_type is EntityType.QUESTIONNAIRES:
            items = [
                self._content[(EntityType.QUESTIONNAIRE, questionnaire_scope(scope_id, qid))]
                for qid in self.questionnaire_ids(scope_id)
                if (EntityType.QUESTIONNAIRE, questionnaire_scope(scope_id, qid)) in self._content
            ]
            if not items:
                return Result.err(ErrorKind.NOT_FOUND, f"no bundled questionnaires for {scope_id}")
            return Result.ok(copy.deepcopy(items))

        payload = self._content.get((entity_type, scope_id))
        if payload is None:
            return Result.err(ErrorKind.NOT_FOUND, f"no bundled {entity_type.value} for {scope_id}")
        return Result.ok(copy.deepcopy(payload))
