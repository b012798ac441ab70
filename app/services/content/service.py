"""Content service - typed accessors over the resolver."""

from loguru import logger

from app.models.common import Resolved
from app.models.content import ROOT_SCOPE, EntityType, questionnaire_scope
from app.services.resolver import ContentResolver
from content_client.catalog import CategorySchema, QuestionnaireSchema
from content_client.knowledge import KnowledgeBlockSchema


class ContentService:
    """Questionnaire and knowledge content for the UI."""

    def __init__(self, resolver: ContentResolver):
        self._resolver = resolver

    async def get_categories(self) -> list[CategorySchema]:
        """Categories in display order."""
        resolved = await self._resolver.resolve(EntityType.CATEGORIES, ROOT_SCOPE)
        categories = [CategorySchema.model_validate(c) for c in resolved.payload]
        return sorted(categories, key=lambda c: c.order)

    async def get_questionnaires(self, category_path: str) -> list[QuestionnaireSchema]:
        resolved = await self._resolver.resolve(EntityType.QUESTIONNAIRES, category_path)
        return [QuestionnaireSchema.model_validate(q) for q in resolved.payload]

    async def get_questionnaire(self, category_path: str, questionnaire_id: str) -> QuestionnaireSchema | None:
        resolved = await self._resolver.resolve(
            EntityType.QUESTIONNAIRE,
            questionnaire_scope(category_path, questionnaire_id),
        )
        if not resolved.payload:
            logger.info("Questionnaire not found: {}/{}", category_path, questionnaire_id)
            return None
        return QuestionnaireSchema.model_validate(resolved.payload)

    async def get_knowledge_block(self, block_id: str) -> KnowledgeBlockSchema:
        resolved = await self._resolver.resolve(EntityType.KNOWLEDGE_BLOCK, block_id)
        return KnowledgeBlockSchema.model_validate(resolved.payload)

    async def get_resource(self, resource_path: str) -> str:
        resolved = await self._resolver.resolve(EntityType.RESOURCE, resource_path)
        return resolved.payload

    async def next_block(self, block: KnowledgeBlockSchema, branch_key: str) -> KnowledgeBlockSchema | None:
        """Follow a branch's `next` reference; None at the end of a journey."""
        path = block.paths.get(branch_key)
        if path is None or not path.next:
            return None
        return await self.get_knowledge_block(path.next)

    async def resolve(self, entity_type: EntityType | str, scope_id: str) -> Resolved:
        """Untyped access with provenance, for callers that show fallback state."""
        return await self._resolver.resolve(entity_type, scope_id)
