"""Manifest API client - published content version."""

from app.models.common import Result
from content_client.base import BaseClient


class ManifestClient(BaseClient):
    """Client for the content version manifest."""

    async def manifest(self) -> Result:
        """GET /contexts/manifest.json - current content version."""
        return await self.fetch("contexts/manifest.json")
