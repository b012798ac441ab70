"""Content API client package."""

from content_client.base import BaseClient, FetchResponse
from content_client.catalog import CatalogClient
from content_client.client import ContentClient
from content_client.knowledge import KnowledgeClient
from content_client.manifest import ManifestClient

__all__ = [
    # Base
    "BaseClient",
    "FetchResponse",
    # Clients
    "CatalogClient",
    "KnowledgeClient",
    "ManifestClient",
    "ContentClient",
]
