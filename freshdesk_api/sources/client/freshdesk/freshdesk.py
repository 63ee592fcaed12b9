import base64
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, field_validator  # type: ignore

from freshdesk_api.config.settings import FreshdeskSettings, get_settings
from freshdesk_api.exceptions.freshdesk_exceptions import FreshDeskConfigurationError
from freshdesk_api.sources.client.freshdesk.outcome import Outcome
from freshdesk_api.sources.client.freshdesk.request_translator import (
    RequestData,
    RequestTranslator,
)
from freshdesk_api.sources.client.http.http_client import (
    DEFAULT_TIMEOUT_MS,
    HTTPClient,
)
from freshdesk_api.sources.client.iclient import IClient
from freshdesk_api.utils.logger import set_log_level

API_PATH = "/api/v2"


class FreshDeskRESTClientViaApiKey(HTTPClient):
    """FreshDesk REST client via API key

    FreshDesk uses Basic Authentication with API Key as username and 'X' as password

    Args:
        domain: The FreshDesk domain (e.g., 'company.freshdesk.com')
        api_key: The API key to use for authentication
        ssl: Whether to use https (default: True)
        timeout_ms: Abort a call after this many milliseconds
        rate_limit_per_minute: Optional maximum calls per minute
        kwargs: Forwarded to HTTPClient (e.g. transport)
    """

    def __init__(
        self,
        domain: str,
        api_key: str,
        ssl: bool = True,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        rate_limit_per_minute: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        # Basic auth with API key as username, 'X' as password
        credentials = f"{api_key}:X"
        encoded_credentials = base64.b64encode(credentials.encode()).decode()

        super().__init__(
            encoded_credentials,
            "Basic",
            timeout_ms=timeout_ms,
            rate_limit_per_minute=rate_limit_per_minute,
            **kwargs,
        )
        self.domain = domain
        scheme = "https" if ssl else "http"
        self.base_url = f"{scheme}://{domain}{API_PATH}"
        self.api_key = api_key

    def get_base_url(self) -> str:
        """Get the base URL"""
        return self.base_url

    def get_domain(self) -> str:
        """Get the FreshDesk domain"""
        return self.domain

    def get_auth_header(self) -> str:
        """Get the Authorization header value"""
        return self.headers["Authorization"]


class FreshDeskApiKeyConfig(BaseModel):
    """Configuration for FreshDesk REST client via API Key

    Args:
        domain: The FreshDesk domain (e.g., 'company.freshdesk.com')
        api_key: The API key for authentication
        ssl: Whether to use SSL (default: True)
        timeout_ms: Abort a call after this many milliseconds
        rate_limit_per_minute: Optional maximum calls per minute
    """
    domain: str
    api_key: str
    ssl: bool = True
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    rate_limit_per_minute: Optional[int] = Field(default=None, gt=0)

    @field_validator('domain')
    @classmethod
    def validate_domain(cls, v: str) -> str:
        """Validate domain field"""
        if not v or not v.strip():
            raise ValueError("domain cannot be empty or None")

        v = v.strip()
        # Validate domain format - should not include protocol
        if v.startswith(('http://', 'https://')):
            raise ValueError("domain should not include protocol (http:// or https://)")

        return v.rstrip("/")

    @field_validator('api_key')
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate api_key field"""
        if not v or not v.strip():
            raise ValueError("api_key cannot be empty or None")

        return v

    @classmethod
    def from_settings(cls, settings: FreshdeskSettings) -> "FreshDeskApiKeyConfig":
        """Build the configuration from loaded settings

        Raises:
            FreshDeskConfigurationError: if the domain or API key is missing
        """
        missing = [name for name in ("domain", "api_key") if not getattr(settings, name)]
        if missing:
            raise FreshDeskConfigurationError(
                "Missing FreshDesk configuration",
                {"missing": missing},
            )
        return cls(
            domain=settings.domain,
            api_key=settings.api_key,
            ssl=settings.ssl,
            timeout_ms=settings.timeout_ms,
            rate_limit_per_minute=settings.rate_limit_per_minute,
        )

    def create_client(self, **kwargs: Any) -> FreshDeskRESTClientViaApiKey:
        """Create FreshDesk REST client"""
        return FreshDeskRESTClientViaApiKey(
            self.domain,
            self.api_key,
            ssl=self.ssl,
            timeout_ms=self.timeout_ms,
            rate_limit_per_minute=self.rate_limit_per_minute,
            **kwargs,
        )

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary"""
        return {
            'domain': self.domain,
            'ssl': self.ssl,
            'timeout_ms': self.timeout_ms,
            'rate_limit_per_minute': self.rate_limit_per_minute,
            'has_api_key': bool(self.api_key)
        }


class FreshDeskClient(IClient):
    """Entry point for Freshdesk v2 API calls

    Wraps a REST client and routes every call through the request translator,
    so all calls return an Outcome.
    """

    def __init__(self, client: FreshDeskRESTClientViaApiKey) -> None:
        """Initialize with a FreshDesk client object"""
        self.client = client
        self.translator = RequestTranslator(client)

    def get_client(self) -> FreshDeskRESTClientViaApiKey:
        """Return the FreshDesk REST client object"""
        return self.client

    def get_base_url(self) -> str:
        """Get the base URL"""
        return self.client.get_base_url()

    def get_domain(self) -> str:
        """Get the FreshDesk domain"""
        return self.client.get_domain()

    def build_url(self, path: str) -> str:
        """Absolute API URL for a path relative to /api/v2"""
        return f"{self.get_base_url()}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        data: RequestData = None,
    ) -> Outcome:
        """Send one call to `path` (relative to /api/v2)"""
        return await self.translator.send(
            method,
            self.client.get_auth_header(),
            self.build_url(path),
            query,
            data,
        )

    async def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Outcome:
        return await self.request("GET", path, query)

    async def post(self, path: str, data: RequestData = None, query: Optional[Mapping[str, Any]] = None) -> Outcome:
        return await self.request("POST", path, query, data)

    async def put(self, path: str, data: RequestData = None, query: Optional[Mapping[str, Any]] = None) -> Outcome:
        return await self.request("PUT", path, query, data)

    async def delete(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Outcome:
        return await self.request("DELETE", path, query)

    async def close(self) -> None:
        """Close the underlying HTTP client"""
        await self.client.close()

    async def __aenter__(self) -> "FreshDeskClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @classmethod
    def build_with_config(
        cls,
        config: FreshDeskApiKeyConfig,
        **kwargs: Any,
    ) -> "FreshDeskClient":
        """Build FreshDeskClient with configuration

        Args:
            config: FreshDeskApiKeyConfig instance
            kwargs: Forwarded to the REST client (e.g. transport)
        Returns:
            FreshDeskClient instance
        """
        return cls(config.create_client(**kwargs))

    @classmethod
    def build_with_api_key(
        cls,
        domain: str,
        api_key: str,
        ssl: bool = True,
        **kwargs: Any,
    ) -> "FreshDeskClient":
        """Build FreshDeskClient with API key directly

        Args:
            domain: The FreshDesk domain (e.g., 'company.freshdesk.com')
            api_key: The API key for authentication
            ssl: Whether to use SSL (default: True)
            kwargs: Forwarded to the REST client (e.g. transport)

        Returns:
            FreshDeskClient: Configured client instance
        """
        config = FreshDeskApiKeyConfig(
            domain=domain,
            api_key=api_key,
            ssl=ssl
        )
        return cls.build_with_config(config, **kwargs)

    @classmethod
    def build_from_settings(
        cls,
        settings: Optional[FreshdeskSettings] = None,
        **kwargs: Any,
    ) -> "FreshDeskClient":
        """Build FreshDeskClient from environment-backed settings

        Args:
            settings: Settings to use (defaults to the global settings)
            kwargs: Forwarded to the REST client (e.g. transport)

        Raises:
            FreshDeskConfigurationError: if the domain or API key is missing
        """
        settings = settings or get_settings()
        config = FreshDeskApiKeyConfig.from_settings(settings)
        set_log_level(settings.log_level)
        return cls.build_with_config(config, **kwargs)
