"""Input source contract.

Why Protocol:
- Structural contract without rigid inheritance.
- The terminal implementation and test doubles are interchangeable.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class InputSource(Protocol):
    """Supplies answers to prompts.

    Design rules:
    - A failed read returns None; callers decide whether that is fatal.
    - Returned text is not trimmed.
    """

    def query_input(self, question: str) -> str | None:
        """Show `question` and read one line of text."""

        ...

    def query_secret(self, question: str) -> str | None:
        """Like `query_input`, without echoing the typed characters.

        Implementations that cannot mask input keep this default.
        """

        return None
