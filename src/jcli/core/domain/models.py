"""Domain models.

These describe *what* a run is made of (the chosen action and the startup
arguments), not how the values are obtained.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from jcli.core.config import DEFAULT_CITY


class MenuSelection(int, Enum):
    """The single action a run executes."""

    GET_TEMPERATURE = 1
    PRETTY_PRINT_JSON = 2
    GET_JSON_API = 3

    @classmethod
    def from_index(cls, index: int) -> "MenuSelection | None":
        """Map a 1-based menu number to a selection, or None when out of range."""

        try:
            return cls(index)
        except ValueError:
            return None

    def label(self) -> str:
        """Human readable label shown in the menu."""

        return _LABELS[self]


_LABELS = {
    MenuSelection.GET_TEMPERATURE: "Get temperature",
    MenuSelection.PRETTY_PRINT_JSON: "Pretty print json",
    MenuSelection.GET_JSON_API: "GET to an API",
}


class StartupArguments(BaseModel):
    """Arguments resolved once at startup (flags, then env/config)."""

    model_config = ConfigDict(frozen=True)

    city: str = Field(
        default=DEFAULT_CITY,
        min_length=1,
        description="City for the weather action.",
    )
    bearer: str = Field(
        default="",
        description="Pre-supplied bearer token; empty means prompt when needed.",
    )
