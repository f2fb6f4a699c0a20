"""Action: pretty-print JSON typed by the user."""

from __future__ import annotations

from rich.console import Console

from jcli.core.domain.errors import InputReadError
from jcli.core.interfaces.input_source import InputSource
from jcli.core.services.json_format import pretty_json

PROMPT = "Show me that ugly json."


def pretty_print_json(input_source: InputSource, console: Console) -> str:
    answer = input_source.query_input(PROMPT)
    if answer is None:
        raise InputReadError("Could not read the JSON input.")
    return pretty_json(answer.strip(), console)
