"""Menu selection: show the actions, read one answer, map it to an action."""

from __future__ import annotations

import logging
import re

from rich.console import Console

from jcli.cli.ui_components import print_menu
from jcli.core.domain.errors import InputReadError, InvalidSelectionError
from jcli.core.domain.models import MenuSelection
from jcli.core.interfaces.input_source import InputSource

logger = logging.getLogger(__name__)

PROMPT = "Option:"

_MENU_NUMBER = re.compile(r"\+?[0-9]{1,20}")


def parse_selection(text: str) -> MenuSelection | None:
    """Parse a positive menu number; anything else yields None."""

    candidate = text.strip()
    if not _MENU_NUMBER.fullmatch(candidate):
        logger.info("No valid option provided: %r", candidate)
        return None

    selection = MenuSelection.from_index(int(candidate))
    if selection is None:
        logger.info("`%s` is not an option", candidate)
    return selection


def choose_action(input_source: InputSource, console: Console) -> MenuSelection:
    print_menu(console)
    answer = input_source.query_input(PROMPT)
    if answer is None:
        raise InputReadError("Could not read the menu option.")

    selection = parse_selection(answer)
    if selection is None:
        raise InvalidSelectionError(f"`{answer.strip()}` is not an option")

    console.print()
    return selection
