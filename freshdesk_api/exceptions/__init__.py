"""Freshdesk client exceptions."""
from freshdesk_api.exceptions.freshdesk_exceptions import (
    DEFAULT_ERROR_MESSAGE,
    NOT_FOUND_MESSAGE,
    ErrorKind,
    FreshDeskConfigurationError,
    FreshdeskError,
    ProtocolError,
    TransportError,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "ErrorKind",
    "FreshDeskConfigurationError",
    "FreshdeskError",
    "ProtocolError",
    "TransportError",
]
