"""Entity types and cache key composition."""

from enum import Enum

# Scope id for singleton entities such as the category index
ROOT_SCOPE = "_"


class EntityType(str, Enum):
    CATEGORIES = "categories"
    QUESTIONNAIRES = "questionnaires"
    QUESTIONNAIRE = "questionnaire"
    KNOWLEDGE_BLOCK = "knowledge_block"
    RESOURCE = "resource"


class Missing(Enum):
    """Sentinel for a single-entity lookup that resolved to nothing."""

    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = Missing.NOT_FOUND


def content_key(entity_type: EntityType | str, scope_id: str) -> str:
    """Key of an entity inside the cache namespace: <entity_type>_<scope_id>."""
    return f"{EntityType(entity_type).value}_{scope_id}"


def questionnaire_scope(category_path: str, questionnaire_id: str) -> str:
    return f"{category_path}/{questionnaire_id}"


def split_questionnaire_scope(scope_id: str) -> tuple[str, str]:
    """Inverse of questionnaire_scope; raises ValueError on a malformed scope."""
    category_path, sep, questionnaire_id = scope_id.rpartition("/")
    if not sep or not category_path or not questionnaire_id:
        raise ValueError(f"Invalid questionnaire scope: {scope_id!r}")
    return category_path, questionnaire_id
