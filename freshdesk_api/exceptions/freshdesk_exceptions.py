from enum import Enum
from typing import Any, Dict, Optional

DEFAULT_ERROR_MESSAGE = "Error in Freshdesk's client API"
NOT_FOUND_MESSAGE = "The requested entity was not found"


class ErrorKind(str, Enum):
    """Classification of a failed Freshdesk call"""
    NOT_FOUND = "not_found"
    UNEXPECTED_STATUS = "unexpected_status"
    TRANSPORT = "transport"


class FreshdeskError(Exception):
    """Base exception for errors surfaced by a Freshdesk call

    Attributes are read-only once the error is constructed.
    """

    def __init__(self, message: Optional[str], kind: ErrorKind, api_target: str = "") -> None:
        self._message = message or DEFAULT_ERROR_MESSAGE
        self._kind = kind
        self._api_target = api_target
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def api_target(self) -> str:
        """'<METHOD> <path>' of the failed call"""
        return self._api_target

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/JSON serialization"""
        return {
            "kind": self._kind.value,
            "message": self._message,
            "api_target": self._api_target,
        }


class ProtocolError(FreshdeskError):
    """Raised when Freshdesk answers with a status outside the success contract

    Args:
        message: Error message (falls back to a generic message when empty)
        data: Parsed response body, if any
        status: HTTP status of the response
        api_target: '<METHOD> <path>' of the request
        request_id: Value of the upstream x-request-id header ('' when absent)
        kind: NOT_FOUND for 404, UNEXPECTED_STATUS otherwise
    """

    def __init__(
        self,
        message: Optional[str],
        data: Any,
        status: int,
        api_target: str,
        request_id: str = "",
        kind: ErrorKind = ErrorKind.UNEXPECTED_STATUS,
    ) -> None:
        super().__init__(message, kind, api_target)
        self._data = data
        self._status = status
        self._request_id = request_id

    @property
    def data(self) -> Any:
        return self._data

    @property
    def status(self) -> int:
        return self._status

    @property
    def request_id(self) -> str:
        return self._request_id

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result.update({
            "status": self._status,
            "request_id": self._request_id,
            "data": self._data,
        })
        return result

    def __repr__(self) -> str:
        return (
            f"ProtocolError(message={self._message!r}, status={self._status}, "
            f"api_target={self._api_target!r}, request_id={self._request_id!r})"
        )


class TransportError(FreshdeskError):
    """Raised when no HTTP response could be obtained (network, DNS, timeout)"""

    def __init__(self, cause: BaseException, api_target: str = "") -> None:
        super().__init__(str(cause) or type(cause).__name__, ErrorKind.TRANSPORT, api_target)
        self._cause = cause
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException:
        """The underlying transport exception"""
        return self._cause

    @property
    def request_id(self) -> str:
        return ""


class FreshDeskConfigurationError(Exception):
    """Custom exception for FreshDesk configuration errors"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.details = details or {}
