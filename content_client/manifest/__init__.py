"""Manifest API client - published content version."""

from content_client.manifest.client import ManifestClient
from content_client.manifest.schemas import ManifestSchema

__all__ = [
    "ManifestClient",
    "ManifestSchema",
]
