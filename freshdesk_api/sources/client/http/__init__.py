"""HTTP client module."""
from freshdesk_api.sources.client.http.http_client import HTTPClient
from freshdesk_api.sources.client.http.http_request import (
    Attachment,
    HTTPRequest,
    JsonBody,
    MultipartBody,
)
from freshdesk_api.sources.client.http.http_response import HTTPResponse
from freshdesk_api.sources.client.http.rate_limited_transport import (
    RateLimitedTransport,
)

__all__ = [
    "Attachment",
    "HTTPClient",
    "HTTPRequest",
    "HTTPResponse",
    "JsonBody",
    "MultipartBody",
    "RateLimitedTransport",
]
