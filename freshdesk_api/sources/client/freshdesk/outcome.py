from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict  # type: ignore

from freshdesk_api.exceptions.freshdesk_exceptions import FreshdeskError


class Success(BaseModel):
    """Successful Freshdesk call

    Args:
        body: Parsed JSON body (None for 204 or an empty body)
        is_last_page: False when the response carried a Link header
        request_id: Upstream x-request-id, '' when absent
        link: Raw Link header, if any
        next_page_url: URL of the rel="next" page, if any
    """
    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    body: Any = None
    is_last_page: bool = True
    request_id: str = ""
    link: Optional[str] = None
    next_page_url: Optional[str] = None

    def unwrap(self) -> Any:
        return self.body

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return self.model_dump()


class Failure(BaseModel):
    """Failed Freshdesk call, carrying the structured error"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: Literal[False] = False
    error: FreshdeskError

    @property
    def request_id(self) -> str:
        return getattr(self.error, "request_id", "")

    def unwrap(self) -> Any:
        """Raise the carried error"""
        raise self.error

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {"ok": False, "error": self.error.to_dict()}


Outcome = Union[Success, Failure]
