"""Action: weather display.

The weather service answers with rich text (HTML for most clients, ANSI
colored text for terminals). Both are flattened into plain lines no wider
than the console.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import quote

from bs4 import BeautifulSoup
from rich.console import Console

from jcli.core.config import DEFAULT_WEATHER_URL_TEMPLATE
from jcli.core.domain.errors import FetchError
from jcli.core.interfaces.query_client import QueryClient

logger = logging.getLogger(__name__)

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def build_weather_url(city: str, url_template: str = DEFAULT_WEATHER_URL_TEMPLATE) -> str:
    return url_template.format(city=quote(city.strip(), safe=""))


def _chunk(line: str, width: int) -> list[str]:
    if not line:
        return [""]
    return [line[i : i + width] for i in range(0, len(line), width)]


def render_weather_text(body: str, width: int) -> list[str]:
    """Flatten an HTML/ANSI body into plain lines of at most `width` chars."""

    width = max(width, 1)
    soup = BeautifulSoup(body, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    pre = soup.find("pre")
    text = (pre or soup).get_text()
    text = _ANSI_ESCAPE.sub("", text)

    lines: list[str] = []
    for raw_line in text.splitlines():
        lines.extend(_chunk(raw_line.rstrip(), width))

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


async def show_weather(
    query_client: QueryClient,
    city: str,
    console: Console,
    *,
    url_template: str = DEFAULT_WEATHER_URL_TEMPLATE,
) -> list[str]:
    url = build_weather_url(city, url_template)
    logger.debug("Fetching weather from %s", url)

    body = await query_client.fetch_text(url, "")
    if body is None:
        raise FetchError("Could not load weather.")

    lines = render_weather_text(body, console.width)
    for line in lines:
        console.out(line, highlight=False)
    return lines
