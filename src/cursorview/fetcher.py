"""HTTP client for the upstream JSON API.

All network I/O goes through a single Fetcher instance. The Fetcher
receives an httpx.AsyncClient via constructor injection; the session owns
the client lifecycle.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from cursorview.config import FetcherSettings
from cursorview.errors import DecodeError, ErrorCode, NetworkError

log = structlog.get_logger()


def build_http_client(settings: FetcherSettings | None = None) -> httpx.AsyncClient:
    """Create the shared httpx client. Called once per session."""
    settings = settings or FetcherSettings()
    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
        limits=httpx.Limits(
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        ),
    )


def _is_transient_status(status_code: int) -> bool:
    return status_code >= 500 or status_code in {408, 429}


class Fetcher:
    """GET-only JSON fetcher implementing FetcherProtocol."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_json(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body.

        Raises NetworkError on transport failures and non-2xx responses, and
        DecodeError when the body is not valid JSON.
        """
        try:
            response = await self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(f"Network error fetching {url}: {exc}") from exc

        if not response.is_success:
            raise NetworkError(
                f"HTTP {response.status_code} fetching {url}",
                code=ErrorCode.HTTP_STATUS_ERROR,
                status_code=response.status_code,
                recoverable=_is_transient_status(response.status_code),
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(f"Invalid JSON from {url}: {exc}") from exc

        log.debug(
            "fetch_complete",
            url=url,
            status_code=response.status_code,
            content_length=len(response.content),
        )
        return payload
