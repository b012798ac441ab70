"""Bundled content - static defaults compiled into the application."""

from app.repositories.bundled.provider import BundledRepository
from app.repositories.bundled.registry import BUNDLED_FILES, CATEGORY_QUESTIONNAIRES, DATA_DIR

__all__ = [
    "BundledRepository",
    "BUNDLED_FILES",
    "CATEGORY_QUESTIONNAIRES",
    "DATA_DIR",
]
