"""Content errors raised inside a tier and converted to results at its boundary."""


class ContentError(Exception):
    """Base class for content resolution errors."""

    def __init__(self, message: str = "Content error"):
        self.message = message
        super().__init__(self.message)


class StorageError(ContentError):
    """Persistent store unavailable or entry corrupt."""

    def __init__(self, message: str = "Storage error"):
        super().__init__(message)


class NetworkError(ContentError):
    """Timeout, connection failure or non-2xx response."""

    def __init__(self, message: str = "Network error", status: int | None = None):
        self.status = status
        super().__init__(message)


class ParseError(ContentError):
    """Malformed JSON/YAML or a payload that fails schema validation."""

    def __init__(self, message: str = "Parse error"):
        super().__init__(message)


class NotFoundError(ContentError):
    """Entity legitimately absent."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)
