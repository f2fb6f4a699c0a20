import asyncio
import json

import httpx
import pytest

from jcli.adapters.http_client import HttpQueryClient, build_async_client, mask_token, parse_url
from jcli.core.config import AppSettings
from jcli.core.domain.errors import ExitCode, InvalidTokenError, InvalidUrlError, NetworkError


class Recorder:
    def __init__(self, response=None, error=None):
        self.response = response or httpx.Response(200, text="{}")
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


def _client(recorder, **settings) -> HttpQueryClient:
    return HttpQueryClient(
        AppSettings(_env_file=None, **settings),
        transport=httpx.MockTransport(recorder),
    )


def test_returns_body_with_bearer_header():
    recorder = Recorder(httpx.Response(200, json={"id": 1}))

    body = asyncio.run(_client(recorder).fetch_text("https://api.example.com/x", "abc"))

    assert json.loads(body) == {"id": 1}
    (request,) = recorder.requests
    assert request.method == "GET"
    assert request.headers["Authorization"] == "Bearer abc"


def test_no_token_sends_no_authorization_header():
    recorder = Recorder()

    asyncio.run(_client(recorder).fetch_text("http://api.example.com/x", ""))

    assert "Authorization" not in recorder.requests[0].headers


def test_error_status_still_returns_text():
    recorder = Recorder(httpx.Response(404, text="not found"))

    assert asyncio.run(_client(recorder).fetch_text("https://example.com/missing", "")) == "not found"


def test_user_agent_comes_from_settings():
    recorder = Recorder()

    asyncio.run(_client(recorder, user_agent="tester/1.0").fetch_text("https://example.com", ""))

    assert recorder.requests[0].headers["User-Agent"] == "tester/1.0"


@pytest.mark.parametrize("url", ["not a url", "example.com/path", "ftp://example.com/file", "http://", ""])
def test_malformed_url_is_rejected_before_sending(url):
    recorder = Recorder()

    with pytest.raises(InvalidUrlError) as excinfo:
        asyncio.run(_client(recorder).fetch_text(url, ""))

    assert excinfo.value.exit_code is ExitCode.VALIDATION
    assert recorder.requests == []


def test_transport_failure_becomes_network_error():
    recorder = Recorder(error=httpx.ConnectError("connection refused"))

    with pytest.raises(NetworkError) as excinfo:
        asyncio.run(_client(recorder).fetch_text("https://example.com", ""))

    assert excinfo.value.exit_code is ExitCode.NETWORK
    assert "connection refused" in excinfo.value.message


def test_parse_url_accepts_http_and_https():
    assert parse_url("https://example.com/a?b=1").host == "example.com"
    assert parse_url("http://localhost:8000/").port == 8000


def test_default_client_has_no_timeout():
    client = build_async_client(AppSettings(_env_file=None))
    try:
        assert client.timeout.read is None
        assert client.follow_redirects is True
    finally:
        asyncio.run(client.aclose())


def test_configured_timeout():
    client = build_async_client(AppSettings(_env_file=None, http_timeout_seconds=2.5))
    try:
        assert client.timeout.read == 2.5
    finally:
        asyncio.run(client.aclose())


def test_mask_token():
    assert mask_token("abc") == "***"
    assert mask_token("abcdefgh") == "ab****gh"


@pytest.mark.parametrize("token", ["tökén", "abc\ndef", "tab\there", "\x00"])
def test_unusable_token_is_rejected_before_sending(token):
    recorder = Recorder()

    with pytest.raises(InvalidTokenError) as excinfo:
        asyncio.run(_client(recorder).fetch_text("https://example.com", token))

    assert excinfo.value.exit_code is ExitCode.VALIDATION
    assert recorder.requests == []


def test_token_with_inner_space_is_sent():
    recorder = Recorder()

    asyncio.run(_client(recorder).fetch_text("https://example.com", "a b"))

    assert recorder.requests[0].headers["Authorization"] == "Bearer a b"
