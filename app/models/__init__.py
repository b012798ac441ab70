"""Models package - results, cache entries and content keys."""

from app.models.common import (
    KV_STORE_DDL,
    BaseEntity,
    CacheEntry,
    ErrorKind,
    Resolved,
    Result,
    Source,
)
from app.models.content import (
    NOT_FOUND,
    ROOT_SCOPE,
    EntityType,
    Missing,
    QuestionnaireState,
    content_key,
    questionnaire_scope,
    split_questionnaire_scope,
)

ALL_DDL = [
    KV_STORE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "CacheEntry",
    "ErrorKind",
    "Resolved",
    "Result",
    "Source",
    "KV_STORE_DDL",
    # Content
    "EntityType",
    "Missing",
    "NOT_FOUND",
    "ROOT_SCOPE",
    "QuestionnaireState",
    "content_key",
    "questionnaire_scope",
    "split_questionnaire_scope",
    # All DDL
    "ALL_DDL",
]
