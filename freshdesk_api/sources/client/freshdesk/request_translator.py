"""
Freshdesk request translator.

Turns one logical API call into exactly one HTTP request and normalizes the
result into an Outcome: a Success with the parsed body and pagination /
request-id metadata, or a Failure carrying a FreshdeskError.
"""

from http import HTTPStatus
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlsplit

import httpx  # type: ignore

from freshdesk_api.exceptions.freshdesk_exceptions import (
    NOT_FOUND_MESSAGE,
    ErrorKind,
    ProtocolError,
    TransportError,
)
from freshdesk_api.sources.client.freshdesk.outcome import (
    Failure,
    Outcome,
    Success,
)
from freshdesk_api.sources.client.http.http_client import HTTPClient
from freshdesk_api.sources.client.http.http_request import (
    HTTPRequest,
    JsonBody,
    MultipartBody,
    RequestBody,
)
from freshdesk_api.sources.client.http.http_response import HTTPResponse
from freshdesk_api.utils.logger import create_logger

logger = create_logger("freshdesk_request_translator")

# Raw body prefix written to debug logs on error paths
LOG_BODY_LIMIT = 200

RequestData = Union[RequestBody, Dict[str, Any], list, None]


def api_target(method: str, url: str) -> str:
    """'<METHOD> <path>' identifier of a call"""
    return f"{method.upper()} {urlsplit(url).path}"


def to_request_body(data: RequestData) -> Optional[RequestBody]:
    """Normalize the `data` argument of `send` into a body variant

    Body variants pass through unchanged and plain lists become JSON. Plain
    mappings are routed through MultipartBody.from_mapping, so a non-empty
    'attachments' list selects multipart encoding.
    """
    if data is None:
        return None
    if isinstance(data, (JsonBody, MultipartBody)):
        return data
    if isinstance(data, Mapping):
        return MultipartBody.from_mapping(data)
    return JsonBody(payload=data)


def handle_response(
    error: Optional[BaseException],
    response: Optional[HTTPResponse],
    body: Any,
    target: str,
) -> Outcome:
    """Classify the result of one call

    Args:
        error: Transport exception raised before a response existed, if any
        response: The received response (None when `error` is set)
        body: Parsed JSON body of the response (None when absent/malformed)
        target: '<METHOD> <path>' of the request

    Returns:
        Success for 200/201/204, Failure otherwise
    """
    if error is not None or response is None:
        logger.debug(f"Error on request {target}: {error!r}")
        return Failure(error=TransportError(error or RuntimeError("No response received"), target))

    logger.debug(f"Got API response for {target}, status [{response.status}]")

    link = response.link
    is_last_page = link is None
    next_page_url = None
    if not is_last_page:
        logger.debug(f"Detected Link header, page is not last: {link}")
        next_page_url = response.links.get("next", {}).get("url")

    request_id = response.request_id

    status = response.status
    if status in (HTTPStatus.OK, HTTPStatus.CREATED):
        return Success(
            body=body,
            is_last_page=is_last_page,
            request_id=request_id,
            link=link,
            next_page_url=next_page_url,
        )

    if status == HTTPStatus.NO_CONTENT:
        return Success(
            body=None,
            is_last_page=is_last_page,
            request_id=request_id,
            link=link,
            next_page_url=next_page_url,
        )

    logger.debug(f"{target}: Status={status}, Response={_truncate(response)}")

    # 404 usually means the entity does not exist on the domain; the body is
    # mostly empty, so its content is not consulted for the message
    if status == HTTPStatus.NOT_FOUND:
        return Failure(error=ProtocolError(
            NOT_FOUND_MESSAGE,
            body,
            status,
            target,
            request_id,
            kind=ErrorKind.NOT_FOUND,
        ))

    # 409 (conflict on a unique field) and every other status
    description = body.get("description") if isinstance(body, dict) else None
    return Failure(error=ProtocolError(
        description,
        body,
        status,
        target,
        request_id,
        kind=ErrorKind.UNEXPECTED_STATUS,
    ))


def _truncate(response: HTTPResponse) -> str:
    text = response.text()
    return text[:LOG_BODY_LIMIT] if text else "Empty"


class RequestTranslator:
    """Sends Freshdesk API calls and normalizes their outcome

    Args:
        http_client: Shared HTTPClient; the translator creates its own when omitted
        timeout_ms: Timeout used when the translator creates its own client
    """

    def __init__(self, http_client: Optional[HTTPClient] = None, timeout_ms: Optional[int] = None) -> None:
        if http_client is None:
            http_client = HTTPClient(timeout_ms=timeout_ms) if timeout_ms else HTTPClient()
        self.http_client = http_client

    async def send(
        self,
        method: str,
        auth: str,
        url: str,
        query: Optional[Mapping[str, Any]] = None,
        data: RequestData = None,
    ) -> Outcome:
        """Issue exactly one HTTP call and return its Outcome

        Args:
            method: HTTP method
            auth: Full value of the Authorization header
            url: Absolute target URL
            query: Query parameters
            data: JsonBody, MultipartBody, or a plain JSON-serializable value

        Returns:
            Success or Failure; transport errors are returned, never raised
        """
        target = api_target(method, url)
        request = HTTPRequest(
            url=url,
            method=method,
            headers={"Authorization": auth},
            body=to_request_body(data),
            query_params=query or {},
        )

        logger.debug(f"Sending {target}")
        try:
            response = await self.http_client.execute(request)
        except httpx.HTTPError as e:
            return handle_response(e, None, None, target)

        return handle_response(None, response, response.json_or_none(), target)

    async def close(self) -> None:
        await self.http_client.close()
