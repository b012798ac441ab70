"""Tests for the typed content facade."""

import pytest
from conftest import json_body

from app.services.content import ContentService

BLOCKS = {
    "/blocks/intro.yaml": (
        200,
        "id: intro\ntitle: Intro\ninitial_question: Existing tests?\n"
        "paths:\n  yes:\n    next: frameworks\n  no:\n    resources: [start.md]\n",
    ),
    "/blocks/frameworks.yaml": (200, "id: frameworks\ntitle: Frameworks\ninitial_question: Which one?\n"),
}


@pytest.fixture
def service(resolver) -> ContentService:
    return ContentService(resolver)


@pytest.mark.asyncio
class TestCatalog:
    async def test_categories_sorted_by_order(self, service, routes):
        routes["/contexts/categories.json"] = json_body(
            [
                {"id": "b", "name": "B", "path": "b", "order": 2},
                {"id": "a", "name": "A", "path": "a", "order": 1},
            ]
        )
        categories = await service.get_categories()
        assert [c.id for c in categories] == ["a", "b"]

    async def test_questionnaire_from_bundle(self, service):
        questionnaire = await service.get_questionnaire("e2e", "e2e-testing")
        assert questionnaire.id == "e2e-testing"
        assert questionnaire.llm_config.max_tokens == 2048
        assert {q.type for q in questionnaire.questions} == {"radio", "checkbox", "textarea"}

    async def test_questionnaire_not_found(self, service):
        assert await service.get_questionnaire("e2e", "nope") is None

    async def test_questionnaires(self, service):
        questionnaires = await service.get_questionnaires("cicd")
        assert [q.title for q in questionnaires] == ["CI/CD Pipeline Setup"]
        assert await service.get_questionnaires("unknown") == []


@pytest.mark.asyncio
class TestKnowledge:
    async def test_next_block(self, service, routes):
        routes.update(BLOCKS)
        block = await service.get_knowledge_block("intro")
        following = await service.next_block(block, "yes")
        assert following.id == "frameworks"

    async def test_end_of_branch(self, service, routes):
        routes.update(BLOCKS)
        block = await service.get_knowledge_block("intro")
        assert await service.next_block(block, "no") is None
        assert await service.next_block(block, "maybe") is None

    async def test_resource(self, service, routes):
        routes["/resources/start.md"] = (200, "# Start")
        assert await service.get_resource("start.md") == "# Start"

    async def test_resolve_exposes_source(self, service):
        resolved = await service.resolve("resource", "missing.md")
        assert resolved.source.value == "mock"
