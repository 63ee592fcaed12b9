"""
Rate-limited HTTP transport.
Spaces outgoing calls out to stay under the Freshdesk per-minute quota.
"""

import logging
from typing import Optional

import httpx  # type: ignore
from aiolimiter import AsyncLimiter  # type: ignore

SECONDS_PER_MINUTE = 60.0


class RateLimitedTransport(httpx.AsyncHTTPTransport):
    """
    HTTP transport that acquires a limiter slot before each request.

    - One slot is acquired per request
    - Requests are never retried; a 429 is handed back to the caller as is
    """

    def __init__(
        self,
        rate_limiter: AsyncLimiter,
        logger: Optional[logging.Logger] = None,
        **kwargs
    ) -> None:
        if rate_limiter is None:
            raise ValueError("rate_limiter is required")
        super().__init__(**kwargs)
        self.rate_limiter = rate_limiter
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def per_minute(cls, max_calls: int, logger: Optional[logging.Logger] = None, **kwargs) -> "RateLimitedTransport":
        """Build a transport allowing at most `max_calls` requests per minute"""
        if not isinstance(max_calls, int) or max_calls <= 0:
            raise ValueError(f"max_calls must be a positive integer, got: {max_calls}")
        return cls(AsyncLimiter(max_calls, SECONDS_PER_MINUTE), logger=logger, **kwargs)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if not self.rate_limiter.has_capacity():
            self.logger.debug(f"Rate limit reached, delaying {request.method} {request.url.path}")
        await self.rate_limiter.acquire()
        return await super().handle_async_request(request)
