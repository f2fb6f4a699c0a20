"""JSON formatter.

Parses a text blob as a single JSON value and re-serializes it with stable,
human-readable indentation. Nothing is printed unless parsing succeeds.

Only strict JSON is accepted: `NaN`/`Infinity` literals, numbers that
overflow a float and lone surrogate escapes are rejected.
"""

from __future__ import annotations

import json
import logging
import math

from rich.console import Console

from jcli.core.domain.errors import InvalidJsonError

logger = logging.getLogger(__name__)

INDENT = 2


def _reject_constant(name: str) -> float:
    raise InvalidJsonError(f"{name} is not valid JSON")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise InvalidJsonError(f"number out of range: {text}")
    return value


def format_json(raw: str) -> str:
    """Return `raw` re-serialized with 2-space indentation.

    Key order follows the source; duplicate keys keep the last value.
    """

    try:
        value = json.loads(raw, parse_constant=_reject_constant, parse_float=_parse_float)
        formatted = json.dumps(value, ensure_ascii=False, indent=INDENT, allow_nan=False)
    except json.JSONDecodeError as exc:
        logger.debug("JSON parse failed at line %d col %d", exc.lineno, exc.colno)
        raise InvalidJsonError(exc.msg) from exc
    except RecursionError as exc:
        raise InvalidJsonError("recursion limit exceeded") from exc
    except ValueError as exc:
        # int digit limit
        raise InvalidJsonError(str(exc)) from exc

    try:
        formatted.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidJsonError("lone surrogate in string") from exc
    return formatted


def pretty_json(raw: str, console: Console) -> str:
    """Print `raw` pretty-formatted, preceded by a blank line."""

    formatted = format_json(raw)
    console.out("")
    console.out(formatted, highlight=False)
    return formatted
