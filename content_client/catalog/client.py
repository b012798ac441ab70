"""Catalog API client - categories, questionnaires."""

from app.models.common import Result
from content_client.base import BaseClient


class CatalogClient(BaseClient):
    """Client for category and questionnaire documents."""

    async def categories(self) -> Result:
        """GET /contexts/categories.json - category index."""
        return await self.fetch("contexts/categories.json")

    async def questionnaire(self, category_path: str, questionnaire_id: str) -> Result:
        """GET /contexts/categories/{path}/{id}.json - questionnaire."""
        return await self.fetch(f"contexts/categories/{category_path}/{questionnaire_id}.json")
