"""Built-in placeholders returned when every other tier misses."""

from typing import Any

from app.models.content import NOT_FOUND, Missing

MOCK_CATEGORIES: tuple[dict[str, Any], ...] = (
    {
        "id": "cicd",
        "name": "CI/CD & DevOps",
        "description": "Continuous Integration, Deployment, and DevOps practices",
        "icon": "🚀",
        "path": "cicd",
        "order": 1,
    },
    {
        "id": "e2e",
        "name": "Testing & Quality",
        "description": "Testing strategies, frameworks, and quality assurance",
        "icon": "🧪",
        "path": "e2e",
        "order": 2,
    },
)

RESOURCE_NOT_FOUND = "# Resource not found\nThe requested resource could not be loaded."


def mock_categories(_scope_id: str) -> list[dict[str, Any]]:
    return [dict(c) for c in MOCK_CATEGORIES]


def mock_questionnaires(_scope_id: str) -> list[dict[str, Any]]:
    return []


def mock_questionnaire(_scope_id: str) -> Missing:
    return NOT_FOUND


def mock_knowledge_block(block_id: str) -> dict[str, Any]:
    return {
        "id": block_id,
        "title": "Mock Knowledge Block",
        "initial_question": "Do you have an existing test system?",
        "paths": {
            "yes": {
                "question": "Which framework are you using?",
                "options": ["cypress", "playwright", "selenium"],
                "next": "framework-specific",
            },
            "no": {
                "question": "What's your primary application type?",
                "options": ["web", "mobile", "desktop"],
                "resources": ["getting-started-with-e2e.md"],
            },
        },
        "context_variables": ["has_test_system", "framework_choice", "app_type"],
    }


def mock_resource(_scope_id: str) -> str:
    return RESOURCE_NOT_FOUND
