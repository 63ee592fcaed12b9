"""
Freshdesk client configuration.

Settings are loaded from environment variables (optionally seeded from a
``.env`` file) and fall back to sensible defaults.
"""

import os
from typing import Dict, Optional

from dotenv import find_dotenv, load_dotenv  # type: ignore
from pydantic import BaseModel, Field, field_validator  # type: ignore

from freshdesk_api.utils.logger import LOG_LEVELS

DEFAULT_TIMEOUT_MS = 30000
DEFAULT_LOG_LEVEL = "INFO"


class FreshdeskSettings(BaseModel):
    """Connection, transport and logging settings for the Freshdesk client."""

    domain: Optional[str] = Field(default=None, description="Freshdesk domain, e.g. 'acme.freshdesk.com'")
    api_key: Optional[str] = Field(default=None, description="Freshdesk API key")
    ssl: bool = Field(default=True, description="Use https for the API base URL")
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0, description="Abort a call after N milliseconds")
    rate_limit_per_minute: Optional[int] = Field(
        default=None,
        gt=0,
        description="Maximum calls per minute (unset = no client-side limiting)",
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    @classmethod
    def from_env(cls) -> "FreshdeskSettings":
        """
        Load settings from environment variables.

        A ``.env`` file in the working directory is read first; variables
        already present in the environment take precedence.

        Returns:
            FreshdeskSettings instance with values from environment
        """
        load_dotenv(find_dotenv(usecwd=True))
        rate_limit = os.getenv("FRESHDESK_RATE_LIMIT_PER_MINUTE")
        return cls(
            domain=os.getenv("FRESHDESK_DOMAIN") or None,
            api_key=os.getenv("FRESHDESK_API_KEY") or None,
            ssl=os.getenv("FRESHDESK_SSL", "true").lower() == "true",
            timeout_ms=int(os.getenv("FRESHDESK_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
            rate_limit_per_minute=int(rate_limit) if rate_limit else None,
            log_level=os.getenv("FRESHDESK_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    def to_dict(self) -> Dict:
        """Convert settings to a dictionary without exposing the API key."""
        data = self.model_dump(exclude={"api_key"})
        data["has_api_key"] = bool(self.api_key)
        return data


# Global settings instance
_settings: Optional[FreshdeskSettings] = None


def get_settings() -> FreshdeskSettings:
    """
    Get settings singleton.

    Returns:
        FreshdeskSettings instance
    """
    global _settings
    if _settings is None:
        _settings = FreshdeskSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
