"""Freshdesk client module."""
from freshdesk_api.sources.client.freshdesk.freshdesk import (
    FreshDeskApiKeyConfig,
    FreshDeskClient,
    FreshDeskRESTClientViaApiKey,
)
from freshdesk_api.sources.client.freshdesk.outcome import (
    Failure,
    Outcome,
    Success,
)
from freshdesk_api.sources.client.freshdesk.request_translator import (
    RequestTranslator,
    handle_response,
)

__all__ = [
    "Failure",
    "FreshDeskApiKeyConfig",
    "FreshDeskClient",
    "FreshDeskRESTClientViaApiKey",
    "Outcome",
    "RequestTranslator",
    "Success",
    "handle_response",
]
