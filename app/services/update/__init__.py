"""Update package - content version checks and cache pre-warming."""

from app.services.update.checker import DownloadReport, UpdateChecker, UpdateInfo
from app.services.update.versioning import compare_versions, is_newer

__all__ = [
    "UpdateChecker",
    "UpdateInfo",
    "DownloadReport",
    "compare_versions",
    "is_newer",
]
