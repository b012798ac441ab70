"""Base HTTP client with retry logic."""

import asyncio
import json
from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from app.errors import NetworkError
from app.models.common import ErrorKind, Result
from settings import API_TIMEOUT, BACKOFF_BASE, CONTENT_BASE_URL, MAX_ATTEMPTS, MAX_CONCURRENT


@dataclass(frozen=True)
class FetchResponse:
    """Raw body of a successful GET."""

    url: str
    status: int
    body: str

    def json(self) -> Any:
        return json.loads(self.body)


def _is_retryable_error(exc: BaseException) -> bool:
    """Only transport failures are retried; an HTTP status is a definitive answer."""
    return isinstance(exc, httpx.TransportError)


class BaseClient:
    """Base async HTTP client with per-attempt timeout and exponential backoff.

    ``fetch`` never raises: transport failures surviving every attempt and
    non-2xx responses come back as error results.
    """

    def __init__(
        self,
        base_url: str = CONTENT_BASE_URL,
        timeout: float = API_TIMEOUT,
        max_attempts: int = MAX_ATTEMPTS,
        backoff: float = BACKOFF_BASE,
        max_concurrent: int = MAX_CONCURRENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._backoff = backoff
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: base_url={}, timeout={}s", self.__class__.__name__, self._base_url, timeout)

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *_):
        await self.close()

    @property
    def request_count(self) -> int:
        return self._request_count

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
                follow_redirects=True,
                transport=self._transport,
            )

    async def close(self) -> None:
        if self._client:
            logger.info("Total content requests: {}", self._request_count)
            await self._client.aclose()
            self._client = None

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    async def fetch(self, path: str) -> Result:
        """GET a resource, returning Result[FetchResponse]."""
        url = self.url_for(path)
        try:
            resp = await self._get_with_retry(url)
        except (httpx.HTTPError, httpx.InvalidURL, NetworkError) as e:
            logger.warning("Fetch failed after {} attempts: {} ({})", self._max_attempts, url, e)
            return Result.from_exception(NetworkError(f"{url}: {e}"))

        if not resp.is_success:
            logger.debug("Fetch miss: {} -> HTTP {}", url, resp.status_code)
            kind = ErrorKind.NOT_FOUND if resp.status_code == 404 else ErrorKind.NETWORK
            return Result.err(kind, f"{url}: HTTP {resp.status_code}")

        return Result.ok(FetchResponse(url=url, status=resp.status_code, body=resp.text))

    async def _get_with_retry(self, url: str) -> httpx.Response:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=self._backoff, max=30),
            retry=retry_if_exception(_is_retryable_error),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self._get(url)
        raise NetworkError(f"{url}: no attempt made")

    async def _get(self, url: str) -> httpx.Response:
        await self.open()
        async with self._sem:
            self._request_count += 1
            return await self._client.get(url)
