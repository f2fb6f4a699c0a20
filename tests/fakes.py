"""In-memory test doubles for the capability interfaces."""

from __future__ import annotations

from jcli.core.interfaces.input_source import InputSource
from jcli.core.interfaces.query_client import QueryClient


class FakeInput(InputSource):
    """Canned answers; records every prompt it was asked."""

    def __init__(self, answers=(), secrets=()):
        self._answers = list(answers)
        self._secrets = list(secrets)
        self.input_prompts: list[str] = []
        self.secret_prompts: list[str] = []

    def query_input(self, question):
        self.input_prompts.append(question)
        return self._answers.pop(0) if self._answers else None

    def query_secret(self, question):
        self.secret_prompts.append(question)
        return self._secrets.pop(0) if self._secrets else None


class NoSecretInput(InputSource):
    """Relies on the protocol's default `query_secret`."""

    def __init__(self, answer):
        self._answer = answer

    def query_input(self, question):
        return self._answer


class StubQueryClient(QueryClient):
    def __init__(self, body=None, error=None):
        self.body = body
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def fetch_text(self, url, token):
        self.calls.append((url, token))
        if self.error is not None:
            raise self.error
        return self.body


def output_of(console) -> str:
    return console.file.getvalue()
