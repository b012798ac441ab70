"""Content resolver - ordered fallback chain over all content sources."""

from app.services.resolver.policy import EntityPolicy, default_policies
from app.services.resolver.service import ContentResolver
from app.services.resolver.tiers import BundledTier, MemoryTier, MockTier, PersistentTier, RemoteTier

__all__ = [
    "ContentResolver",
    "EntityPolicy",
    "default_policies",
    "MemoryTier",
    "PersistentTier",
    "RemoteTier",
    "BundledTier",
    "MockTier",
]
