"""Per-tier result type and provenance."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.errors import ContentError, NetworkError, NotFoundError, ParseError, StorageError


class ErrorKind(str, Enum):
    STORAGE = "storage"
    NETWORK = "network"
    PARSE = "parse"
    NOT_FOUND = "not_found"


class Source(str, Enum):
    """Tier that satisfied a resolution."""

    MEMORY = "memory"
    PERSISTENT = "persistent"
    REMOTE = "remote"
    BUNDLED = "bundled"
    MOCK = "mock"


_ERROR_KINDS: dict[type[ContentError], ErrorKind] = {
    StorageError: ErrorKind.STORAGE,
    NetworkError: ErrorKind.NETWORK,
    ParseError: ErrorKind.PARSE,
    NotFoundError: ErrorKind.NOT_FOUND,
}


@dataclass(frozen=True)
class Result:
    """Either a value or an error kind with a short detail message."""

    value: Any = None
    error: ErrorKind | None = None
    detail: str = ""

    @classmethod
    def ok(cls, value: Any) -> "Result":
        return cls(value=value)

    @classmethod
    def err(cls, kind: ErrorKind, detail: str = "") -> "Result":
        return cls(error=kind, detail=detail)

    @classmethod
    def from_exception(cls, exc: ContentError) -> "Result":
        """Map a content exception to its error kind."""
        for exc_type, kind in _ERROR_KINDS.items():
            if isinstance(exc, exc_type):
                return cls.err(kind, exc.message)
        return cls.err(ErrorKind.STORAGE, str(exc))

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: Any) -> Any:
        return self.value if self.is_ok else default


@dataclass(frozen=True)
class Resolved:
    """Payload plus the tier it came from."""

    payload: Any
    source: Source

    @property
    def is_fallback(self) -> bool:
        return self.source in (Source.BUNDLED, Source.MOCK)
