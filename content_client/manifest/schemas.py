"""Manifest schema."""

import re
from datetime import datetime

from pydantic import BaseModel, field_validator

VERSION_PATTERN = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+")


class ManifestSchema(BaseModel):
    """Published content version, e.g. 2024.12.15.1 (YYYY.MM.DD.PATCH)."""

    version: str
    timestamp: datetime
    checksum: str | None = None

    @field_validator("version")
    @classmethod
    def _check_version(cls, v: str) -> str:
        v = v.strip()
        if not VERSION_PATTERN.fullmatch(v):
            raise ValueError(f"Malformed version: {v!r}")
        return v
