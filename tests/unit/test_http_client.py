"""
HTTPClient tests: header merging, encoding, transport selection and lifecycle.
"""

import pytest  # type: ignore

from freshdesk_api.sources.client.http.http_client import HTTPClient
from freshdesk_api.sources.client.http.http_request import (
    Attachment,
    HTTPRequest,
    JsonBody,
    MultipartBody,
)
from freshdesk_api.sources.client.http.rate_limited_transport import (
    RateLimitedTransport,
)


class TestHTTPClient:
    """Request execution against the mock transport."""

    @pytest.mark.asyncio
    async def test_client_token_sets_authorization(self, transport):
        async with HTTPClient("abc", "Bearer", transport=transport.mock) as client:
            response = await client.execute(HTTPRequest(url="https://x.io/api"))

        assert response.status == 200
        assert transport.last_request.headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_request_headers_take_precedence(self, transport):
        client = HTTPClient("abc", transport=transport.mock)
        await client.execute(HTTPRequest(url="https://x.io/api", headers={"Authorization": "Basic other"}))
        await client.close()

        assert transport.last_request.headers["Authorization"] == "Basic other"

    @pytest.mark.asyncio
    async def test_url_with_braces_is_sent_verbatim(self, transport):
        client = HTTPClient(transport=transport.mock)
        await client.execute(HTTPRequest(url="https://x.io/api/v2/search/tickets?query=%22{x}%22"))
        await client.close()

        request = transport.last_request
        assert request.url.path == "/api/v2/search/tickets"
        assert "{x}" in request.url.params["query"]

    def test_build_request_kwargs_for_json(self):
        client = HTTPClient()
        kwargs = client.build_request_kwargs(HTTPRequest(url="https://x.io", body=JsonBody(payload={"a": 1})))

        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["content"] == '{"a": 1}'
        assert "files" not in kwargs

    def test_build_request_kwargs_for_multipart(self):
        client = HTTPClient()
        body = MultipartBody(
            fields={"tags": ["a", "b"], "subject": "Hi"},
            attachments=[Attachment(filename="a.txt", content=b"a")],
        )
        kwargs = client.build_request_kwargs(
            HTTPRequest(url="https://x.io", headers={"Content-Type": "application/json"}, body=body)
        )

        assert "Content-Type" not in kwargs["headers"]
        assert kwargs["data"] == {"tags[]": ["a", "b"], "subject": "Hi"}
        assert kwargs["files"] == [("attachments[]", ("a.txt", b"a", "application/octet-stream"))]

    @pytest.mark.asyncio
    async def test_rate_limit_selects_rate_limited_transport(self):
        client = HTTPClient(rate_limit_per_minute=100)
        httpx_client = await client._ensure_client()

        assert isinstance(httpx_client._transport, RateLimitedTransport)
        await client.close()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, transport):
        client = HTTPClient(transport=transport.mock)
        await client._ensure_client()

        await client.close()
        await client.close()

        assert client.client is None

    def test_timeout_in_seconds(self):
        assert HTTPClient(timeout_ms=2500).timeout == 2.5
