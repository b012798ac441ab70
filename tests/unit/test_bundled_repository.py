"""Tests for bundled content."""

import json

from app.models.common import ErrorKind
from app.models.content import EntityType
from app.repositories import BundledRepository
from app.repositories.bundled import DATA_DIR


class TestLookup:
    def test_categories_index(self, bundled):
        result = bundled.lookup(EntityType.CATEGORIES, "_")
        expected = json.loads((DATA_DIR / "contexts/categories.json").read_text(encoding="utf-8"))
        assert result.is_ok
        assert result.value == expected

    def test_questionnaire(self, bundled):
        result = bundled.lookup("questionnaire", "cicd/cicd-pipeline")
        assert result.value["title"] == "CI/CD Pipeline Setup"

    def test_questionnaire_list(self, bundled):
        result = bundled.lookup(EntityType.QUESTIONNAIRES, "e2e")
        assert [q["id"] for q in result.value] == ["e2e-testing"]

    def test_missing_is_not_found(self, bundled):
        assert bundled.lookup(EntityType.QUESTIONNAIRE, "e2e/nope").error is ErrorKind.NOT_FOUND
        assert bundled.lookup(EntityType.QUESTIONNAIRES, "security").error is ErrorKind.NOT_FOUND
        assert bundled.lookup(EntityType.KNOWLEDGE_BLOCK, "intro").error is ErrorKind.NOT_FOUND

    def test_returns_copies(self, bundled):
        first = bundled.lookup(EntityType.CATEGORIES, "_").value
        first["categories"].clear()
        assert bundled.lookup(EntityType.CATEGORIES, "_").value["categories"]


class TestIndex:
    def test_questionnaire_ids(self, bundled):
        assert bundled.questionnaire_ids("cicd") == ("cicd-pipeline",)
        assert bundled.questionnaire_ids("unknown") == ()

    def test_category_paths(self, bundled):
        assert bundled.category_paths() == ("cicd", "e2e")

    def test_unreadable_file_skipped(self, tmp_path):
        (tmp_path / "bad.json").write_text("{", encoding="utf-8")
        repo = BundledRepository(
            data_dir=tmp_path,
            files={(EntityType.CATEGORIES, "_"): "bad.json", (EntityType.RESOURCE, "x"): "missing.json"},
            index={},
        )
        assert repo.lookup(EntityType.CATEGORIES, "_").error is ErrorKind.NOT_FOUND
