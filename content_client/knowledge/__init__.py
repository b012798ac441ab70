"""Knowledge API client - knowledge blocks, resources."""

from content_client.knowledge.client import KnowledgeClient
from content_client.knowledge.schemas import KnowledgeBlockSchema, PathSchema

__all__ = [
    "KnowledgeClient",
    "KnowledgeBlockSchema",
    "PathSchema",
]
