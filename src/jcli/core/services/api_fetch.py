"""Action: GET an arbitrary URL and pretty-print the JSON response.

Token resolution:
- A pre-supplied token (flag, J_BEARER, .env) is used as is and the secret
  prompt is skipped.
- Otherwise the user is asked for one; an empty or unreadable answer means
  "no token", never an error.
"""

from __future__ import annotations

import logging

from rich.console import Console

from jcli.core.domain.errors import FetchError, InputReadError
from jcli.core.interfaces.input_source import InputSource
from jcli.core.interfaces.query_client import QueryClient
from jcli.core.services.json_format import pretty_json

logger = logging.getLogger(__name__)

URL_PROMPT = "Url: "
TOKEN_PROMPT = "Token (If empty ignored): "


def resolve_token(input_source: InputSource, pre_token: str, console: Console) -> str:
    pre_token = pre_token.strip()
    if pre_token:
        console.print("Using token from configuration.")
        return pre_token

    secret = input_source.query_secret(TOKEN_PROMPT)
    if secret is None:
        logger.debug("Secret prompt unavailable, continuing without token")
        return ""
    return secret.strip()


async def fetch_json_api(
    input_source: InputSource,
    query_client: QueryClient,
    pre_token: str,
    console: Console,
) -> str:
    url = input_source.query_input(URL_PROMPT)
    if url is None:
        raise InputReadError("No url")

    token = resolve_token(input_source, pre_token, console)
    body = await query_client.fetch_text(url.strip(), token)
    if body is None:
        raise FetchError("Could not get answer")
    return pretty_json(body, console)
