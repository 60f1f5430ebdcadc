"""Shared fixtures: a scripted fake TestRail behind httpx.MockTransport."""

from typing import Any, Optional
from urllib.parse import parse_qsl

import httpx
import pytest

from testrail_client.client import TestRailClient
from testrail_client.config import ClientConfig
from testrail_stub.config import StubConfig
from testrail_stub.main import create_app

HOST = "https://example.testrail.io"
EMAIL = "qa-bot@example.com"
API_KEY = "api-key-123"
EMPTY_PAGE = {"offset": 0, "limit": 250, "size": 0, "_links": {"next": None, "prev": None}}


class FakeTestRail:
    """
    MockTransport handler that records every request and answers with the
    response configured by ``respond`` (an empty list envelope with status
    200 by default).
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._status_code = 200
        self._response_kwargs: dict[str, Any] = {"json": EMPTY_PAGE}
        self._error: Optional[Exception] = None

    def respond(self, status_code: int = 200, **kwargs: Any) -> None:
        self._status_code = status_code
        self._response_kwargs = kwargs
        self._error = None

    def fail_with(self, error: Exception) -> None:
        self._error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return httpx.Response(self._status_code, **self._response_kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def split_request(request: httpx.Request) -> tuple[str, dict[str, str]]:
    """Return the API method path and the decoded query parameters."""
    query = request.url.query.decode("ascii")
    method_path, _, rest = query.partition("&")
    return method_path, dict(parse_qsl(rest))


@pytest.fixture
def fake_api():
    return FakeTestRail()


@pytest.fixture
def client_config():
    return ClientConfig(host=HOST, email=EMAIL, password=API_KEY)


@pytest.fixture
async def client(client_config, fake_api):
    async with TestRailClient(
        client_config, http_transport=httpx.MockTransport(fake_api)
    ) as testrail:
        yield testrail


@pytest.fixture
def stub_config():
    return StubConfig(
        email=EMAIL,
        api_key=API_KEY,
        seed_data=True,
        log_level="DEBUG",
        log_format="console",
    )


@pytest.fixture
def stub_app(stub_config):
    return create_app(stub_config)
