"""Terminal input source (Rich)."""

from __future__ import annotations

import logging

from rich.console import Console

from jcli.core.interfaces.input_source import InputSource

logger = logging.getLogger(__name__)


class TerminalInput(InputSource):
    """Reads answers from the terminal.

    The question is printed on its own line for plain input; secrets are read
    with echo disabled (getpass, through `Console.input(password=True)`).
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def query_input(self, question: str) -> str | None:
        self._console.print(question, markup=False, highlight=False)
        try:
            return self._console.input()
        except (EOFError, OSError) as exc:
            logger.debug("Input read failed: %r", exc)
            return None

    def query_secret(self, question: str) -> str | None:
        try:
            return self._console.input(question, markup=False, password=True)
        except (EOFError, OSError) as exc:
            logger.debug("Secret read failed: %r", exc)
            return None
