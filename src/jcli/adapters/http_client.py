"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and redirect policy in one place.
- Makes testing easy: the transport can be swapped for `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from jcli.core.config import AppSettings
from jcli.core.domain.errors import InvalidTokenError, InvalidUrlError, NetworkError
from jcli.core.interfaces.query_client import QueryClient

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the application defaults.

    Why a builder:
    - Centralizes timeouts/headers so every request behaves the same.
    - `transport` lets tests answer requests without a network.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json,text/html;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def parse_url(url: str) -> httpx.URL:
    """Parse `url`, raising `InvalidUrlError` unless it is an absolute http(s) URL."""

    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidUrlError(url) from exc
    if parsed.scheme not in _ALLOWED_SCHEMES or not parsed.host:
        raise InvalidUrlError(url)
    return parsed


def check_token(token: str) -> str:
    """Return `token` if it can travel in an HTTP header, else raise `InvalidTokenError`."""

    if not token.isascii() or not token.isprintable():
        raise InvalidTokenError()
    return token


def mask_token(token: str) -> str:
    if len(token) <= 4:
        return "*" * len(token)
    return f"{token[:2]}{'*' * (len(token) - 4)}{token[-2:]}"


class HttpQueryClient(QueryClient):
    """Production query client: one GET per call, optional bearer auth."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch_text(self, url: str, token: str) -> str | None:
        parsed = parse_url(url)

        headers: dict[str, str] = {}
        if token:
            check_token(token)
            logger.info("Sending bearer token %s", mask_token(token))
            headers["Authorization"] = f"Bearer {token}"

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(parsed, headers=headers)
        except httpx.HTTPError as exc:
            raise NetworkError(f"failed Loading page: {exc}") from exc

        logger.debug("GET %s -> HTTP %d", parsed, response.status_code)
        return response.text
