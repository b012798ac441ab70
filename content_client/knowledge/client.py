"""Knowledge API client - knowledge blocks, markdown resources."""

from app.models.common import Result
from content_client.base import BaseClient


class KnowledgeClient(BaseClient):
    """Client for knowledge blocks and their resources."""

    async def block(self, block_id: str) -> Result:
        """GET /blocks/{id}.yaml - knowledge block (YAML)."""
        return await self.fetch(f"blocks/{block_id}.yaml")

    async def resource(self, resource_path: str) -> Result:
        """GET /resources/{path} - raw resource text."""
        return await self.fetch(f"resources/{resource_path}")
