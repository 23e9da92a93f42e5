"""
Base API Client - Shared request handling for upstream HTTP APIs.
All API services should inherit from this and use its _core_async_fetch method.

Requests are single-shot: no retries, no deduplication and no caching.
The response body is always read as text so callers can surface upstream
error bodies verbatim and decide themselves how to parse a success body.
"""

from dataclasses import dataclass
from typing import Any

import aiohttp

from utils.get_logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class APIResponse:
    """Status line and body of a completed upstream request."""

    status: int
    reason: str
    text: str
    url: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class BaseAPIClient:
    """
    Base class for API clients with shared request handling.
    """

    async def _core_async_fetch(
        self,
        url: str,
        headers: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> APIResponse:
        """
        Core async HTTP GET request.

        The request is awaited fully, including the body read. Transport
        failures (DNS, connection resets, timeouts) propagate to the caller.

        Args:
            url: Full URL to request
            headers: Optional HTTP headers
            params: Optional query parameters
            timeout: Total timeout in seconds; None keeps the aiohttp session default

        Returns:
            APIResponse with the status code, reason phrase and decoded body text
        """
        request_kwargs: dict[str, Any] = {"headers": headers, "params": params}
        if timeout is not None:
            request_kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

        async with (  # noqa: SIM117
            aiohttp.ClientSession() as session,
            session.get(url, **request_kwargs) as response,
        ):
            status = response.status
            reason = response.reason or ""
            text = await response.text(errors="replace")

        if not 200 <= status < 300:
            logger.warning(f"API returned status {status} for {url}")

        return APIResponse(status=status, reason=reason, text=text, url=url)
