import logging
from typing import Any, Dict, Optional

import httpx  # type: ignore

from freshdesk_api.sources.client.http.http_request import (
    HTTPRequest,
    JsonBody,
    MultipartBody,
)
from freshdesk_api.sources.client.http.http_response import HTTPResponse
from freshdesk_api.sources.client.http.rate_limited_transport import (
    RateLimitedTransport,
)
from freshdesk_api.sources.client.iclient import IClient

JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPE = "multipart/form-data"
DEFAULT_TIMEOUT_MS = 30000


class HTTPClient(IClient):
    """
    Async HTTP client with authentication.

    Features:
    - Authorization header injection (per client, overridable per request)
    - JSON or multipart body encoding based on the request body variant
    - Optional client-side rate limiting (no retries)

    Args:
        token: Authentication token
        token_type: Token type for Authorization header (default: "Bearer")
        timeout_ms: Abort a call after this many milliseconds (default: 30000)
        follow_redirects: Whether to follow HTTP redirects (default: True)
        rate_limit_per_minute: Optional maximum calls per minute
        transport: Optional httpx transport (takes precedence over the rate limit)
        logger: Optional logger instance
    """
    def __init__(
        self,
        token: Optional[str] = None,
        token_type: str = "Bearer",
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        follow_redirects: bool = True,
        rate_limit_per_minute: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        self.headers: Dict[str, str] = {}
        if token:
            self.headers["Authorization"] = f"{token_type} {token}"
        self.timeout_ms = timeout_ms
        self.follow_redirects = follow_redirects
        self.rate_limit_per_minute = rate_limit_per_minute
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> "HTTPClient":
        """Get the client"""
        return self

    @property
    def timeout(self) -> float:
        """Timeout in seconds"""
        return self.timeout_ms / 1000.0

    async def _ensure_client(self) -> httpx.AsyncClient:
        """
        Ensure client is created and available.
        Uses a rate-limited transport when a rate limit is configured.
        """
        if self.client is None:
            transport = self.transport
            if transport is None and self.rate_limit_per_minute:
                transport = RateLimitedTransport.per_minute(self.rate_limit_per_minute, logger=self.logger)
            self.client = httpx.AsyncClient(
                transport=transport,
                timeout=self.timeout,
                follow_redirects=self.follow_redirects
            )
        return self.client

    def build_request_kwargs(self, request: HTTPRequest) -> Dict[str, Any]:
        """Build the keyword arguments for httpx from a request

        Content-Type is JSON unless the body is multipart, in which case httpx
        sets multipart/form-data with its boundary.
        """
        # Request headers take precedence over client headers
        headers = {**self.headers, **request.headers}
        request_kwargs: Dict[str, Any] = {
            "params": request.query_params,
            "headers": headers,
        }

        if isinstance(request.body, MultipartBody):
            headers.pop("Content-Type", None)
            request_kwargs["data"] = _group_form_fields(request.body)
            request_kwargs["files"] = request.body.file_parts()
        else:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            if isinstance(request.body, JsonBody):
                request_kwargs["content"] = request.body.serialize()

        return request_kwargs

    async def execute(self, request: HTTPRequest, **kwargs) -> HTTPResponse:
        """Execute an HTTP request
        Args:
            request: The HTTP request to execute
            kwargs: Additional keyword arguments to pass to the request
        Returns:
            A HTTPResponse object containing the response from the server
        Raises:
            httpx.HTTPError: if no response could be obtained
        """
        client = await self._ensure_client()
        request_kwargs = {**self.build_request_kwargs(request), **kwargs}
        response = await client.request(request.method, request.url, **request_kwargs)
        return HTTPResponse(response)

    async def close(self) -> None:
        """Close the client"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry"""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit"""
        await self.close()


def _group_form_fields(body: MultipartBody) -> Dict[str, Any]:
    # httpx sends one part per list element, preserving key order
    grouped: Dict[str, Any] = {}
    for key, value in body.form_fields():
        if key in grouped:
            existing = grouped[key]
            if not isinstance(existing, list):
                grouped[key] = [existing]
            grouped[key].append(value)
        else:
            grouped[key] = value
    return grouped
