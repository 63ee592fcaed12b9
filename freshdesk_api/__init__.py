"""Async client for the Freshdesk v2 REST API."""
from freshdesk_api.exceptions.freshdesk_exceptions import (
    ErrorKind,
    FreshDeskConfigurationError,
    FreshdeskError,
    ProtocolError,
    TransportError,
)
from freshdesk_api.sources.client.freshdesk import (
    Failure,
    FreshDeskApiKeyConfig,
    FreshDeskClient,
    Outcome,
    RequestTranslator,
    Success,
)
from freshdesk_api.sources.client.http import (
    Attachment,
    JsonBody,
    MultipartBody,
)

__all__ = [
    "Attachment",
    "ErrorKind",
    "Failure",
    "FreshDeskApiKeyConfig",
    "FreshDeskClient",
    "FreshDeskConfigurationError",
    "FreshdeskError",
    "JsonBody",
    "MultipartBody",
    "Outcome",
    "ProtocolError",
    "RequestTranslator",
    "Success",
    "TransportError",
]
