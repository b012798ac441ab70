"""Static registry of content bundled with the application."""

from pathlib import Path
from types import MappingProxyType

from app.models.content import ROOT_SCOPE, EntityType, questionnaire_scope

DATA_DIR = Path(__file__).parent / "data"

# (entity type, scope id) -> file under DATA_DIR
BUNDLED_FILES = MappingProxyType(
    {
        (EntityType.CATEGORIES, ROOT_SCOPE): "contexts/categories.json",
        (EntityType.QUESTIONNAIRE, questionnaire_scope("cicd", "cicd-pipeline")): (
            "contexts/categories/cicd/cicd-pipeline.json"
        ),
        (EntityType.QUESTIONNAIRE, questionnaire_scope("e2e", "e2e-testing")): (
            "contexts/categories/e2e/e2e-testing.json"
        ),
    }
)

# Questionnaire ids published per category path
CATEGORY_QUESTIONNAIRES = MappingProxyType(
    {
        "cicd": ("cicd-pipeline",),
        "e2e": ("e2e-testing",),
    }
)
