"""Content models - entity keys and journey state."""

from app.models.content.journey import QuestionnaireState
from app.models.content.keys import (
    NOT_FOUND,
    ROOT_SCOPE,
    EntityType,
    Missing,
    content_key,
    questionnaire_scope,
    split_questionnaire_scope,
)

__all__ = [
    "EntityType",
    "Missing",
    "NOT_FOUND",
    "ROOT_SCOPE",
    "content_key",
    "questionnaire_scope",
    "split_questionnaire_scope",
    "QuestionnaireState",
]
