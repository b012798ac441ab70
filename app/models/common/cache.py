"""Cache entry and key/value table definitions."""

from typing import Any

from pydantic import BaseModel, Field

KV_STORE_DDL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key VARCHAR PRIMARY KEY,
    value VARCHAR NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""


class CacheEntry(BaseModel):
    """Serialized form of a cached payload."""

    payload: Any
    stored_at: float = Field(alias="storedAt")
    ttl_seconds: float = Field(alias="ttlSeconds")

    class Config:
        populate_by_name = True

    def is_valid(self, now: float) -> bool:
        """An entry is valid while its age does not exceed its TTL."""
        return now - self.stored_at <= self.ttl_seconds

    def dumps(self) -> str:
        return self.model_dump_json(by_alias=True)
