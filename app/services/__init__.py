"""Services package - service class exports."""

from app.services.content import ContentService
from app.services.resolver import ContentResolver
from app.services.update import UpdateChecker

__all__ = [
    "ContentResolver",
    "ContentService",
    "UpdateChecker",
]
