"""Freshdesk client configuration."""
from freshdesk_api.config.settings import (
    FreshdeskSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "FreshdeskSettings",
    "get_settings",
    "reset_settings",
]
