"""Content service package."""

from app.services.content.service import ContentService

__all__ = [
    "ContentService",
]
