from typing import Any, Dict, Optional

import httpx  # type: ignore

REQUEST_ID_HEADER = "x-request-id"
LINK_HEADER = "link"


class HTTPResponse:
    """HTTP response
    Args:
        response: The httpx response to wrap
    """
    def __init__(self, response: httpx.Response) -> None:
        self.response = response

    @property
    def status(self) -> int:
        """Get the status code of the response"""
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        """Get the (case-insensitive) headers of the response"""
        return self.response.headers

    @property
    def url(self) -> str:
        return str(self.response.url)

    @property
    def is_success(self) -> bool:
        return self.response.is_success

    @property
    def request_id(self) -> str:
        """Upstream correlation id, '' when the header is absent"""
        return self.response.headers.get(REQUEST_ID_HEADER, "")

    @property
    def link(self) -> Optional[str]:
        """Raw Link header, None when absent"""
        return self.response.headers.get(LINK_HEADER)

    @property
    def links(self) -> Dict[str, Dict[str, str]]:
        """Link header parsed by relation"""
        return self.response.links

    def text(self) -> str:
        """Get the text of the response"""
        return self.response.text

    def bytes(self) -> bytes:
        """Get the raw content of the response"""
        return self.response.content

    def json(self) -> Any:
        """Get the JSON body of the response

        Raises:
            ValueError: if the body is not valid JSON
        """
        return self.response.json()

    def json_or_none(self) -> Any:
        """Get the JSON body, or None for an empty or malformed body"""
        if not self.response.content:
            return None
        try:
            return self.response.json()
        except ValueError:
            return None
