"""Catalog API client - categories, questionnaires."""

from content_client.catalog.client import CatalogClient
from content_client.catalog.schemas import (
    CategoriesSchema,
    CategorySchema,
    LLMConfigSchema,
    OptionSchema,
    QuestionnaireMetadataSchema,
    QuestionnaireSchema,
    QuestionSchema,
)

__all__ = [
    "CatalogClient",
    "CategoriesSchema",
    "CategorySchema",
    "LLMConfigSchema",
    "OptionSchema",
    "QuestionnaireMetadataSchema",
    "QuestionnaireSchema",
    "QuestionSchema",
]
