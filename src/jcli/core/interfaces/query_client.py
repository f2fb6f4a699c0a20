"""Query client contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class QueryClient(Protocol):
    """Performs one GET request and returns the body as text.

    Design rules:
    - `fetch_text` is async because it does network I/O.
    - A non-empty `token` is sent as a bearer credential.
    - The body is returned whatever the HTTP status code is.
    """

    async def fetch_text(self, url: str, token: str) -> str | None:
        ...
