"""Typed errors and the exit-code contract.

Every failure an action can hit is raised as a `JCliError` subclass and
bubbles up to the single boundary in `jcli.cli.main`, which prints the
message and exits with the error's code.

Code  Meaning
----  -------
  0   Success
  1   Invalid menu selection
  2   Input could not be read
  3   Validation failure (malformed URL, invalid JSON, unusable token)
  4   Network failure or empty response
  5   Invalid configuration (env vars, .env)
  6   Any other error
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    INVALID_SELECTION = 1
    INPUT = 2
    VALIDATION = 3
    NETWORK = 4
    CONFIG = 5
    ERROR = 6


class JCliError(Exception):
    """Base class for errors that end a run with a message."""

    exit_code: ExitCode = ExitCode.ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidSelectionError(JCliError):
    exit_code = ExitCode.INVALID_SELECTION


class InputReadError(JCliError):
    exit_code = ExitCode.INPUT


class JCliValidationError(JCliError):
    exit_code = ExitCode.VALIDATION


class InvalidUrlError(JCliValidationError):
    def __init__(self, url: str) -> None:
        super().__init__(f"Not a valid url: {url!r}")
        self.url = url


class InvalidJsonError(JCliValidationError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"I only work with true JSONs. ({detail})")
        self.detail = detail


class NetworkError(JCliError):
    exit_code = ExitCode.NETWORK


class FetchError(JCliError):
    """The query client returned no body."""

    exit_code = ExitCode.NETWORK


class InvalidTokenError(JCliValidationError):
    def __init__(self) -> None:
        super().__init__("Token must be printable ASCII.")


class ConfigError(JCliError):
    exit_code = ExitCode.CONFIG
