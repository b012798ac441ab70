"""Combined content client sharing one connection pool."""

from content_client.catalog.client import CatalogClient
from content_client.knowledge.client import KnowledgeClient
from content_client.manifest.client import ManifestClient


class ContentClient(CatalogClient, KnowledgeClient, ManifestClient):
    """All content endpoints on a single httpx client."""
