"""Tests for the retrying content client."""

import httpx
import pytest
from conftest import BASE_URL

from app.models.common import ErrorKind
from content_client import ContentClient


@pytest.mark.asyncio
class TestFetch:
    async def test_success(self, client, routes, calls):
        routes["/contexts/categories.json"] = (200, '{"categories": []}')
        result = await client.categories()
        assert result.is_ok
        assert result.value.status == 200
        assert result.value.json() == {"categories": []}
        assert calls == ["/contexts/categories.json"]

    async def test_404_not_retried(self, client, calls):
        result = await client.questionnaire("cicd", "missing")
        assert result.error is ErrorKind.NOT_FOUND
        assert len(calls) == 1

    async def test_5xx_not_retried(self, client, routes, calls):
        routes["/blocks/b.yaml"] = (503, "busy")
        result = await client.block("b")
        assert result.error is ErrorKind.NETWORK
        assert len(calls) == 1

    async def test_connect_error_retried_three_times(self, client, routes, calls):
        routes["/contexts/manifest.json"] = httpx.ConnectError
        result = await client.manifest()
        assert result.error is ErrorKind.NETWORK
        assert len(calls) == 3
        assert client.request_count == 3

    async def test_timeout_retried(self, client, routes, calls):
        routes["/resources/a.md"] = httpx.ReadTimeout
        result = await client.resource("a.md")
        assert result.error is ErrorKind.NETWORK
        assert len(calls) == 3

    async def test_recovers_after_transient_failure(self):
        attempts = []

        def flaky(request):
            attempts.append(1)
            if len(attempts) < 2:
                raise httpx.ConnectError("down", request=request)
            return httpx.Response(200, text="# ok")

        async with ContentClient(base_url=BASE_URL, backoff=0, transport=httpx.MockTransport(flaky)) as client:
            result = await client.resource("a.md")
        assert result.is_ok
        assert result.value.body == "# ok"
        assert len(attempts) == 2

    async def test_absolute_url_passthrough(self, client, routes, calls):
        routes["/elsewhere.json"] = (200, "{}")
        result = await client.fetch("https://content.test/elsewhere.json")
        assert result.is_ok
