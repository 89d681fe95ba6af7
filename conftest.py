"""Shared test fixtures for every client package.

Provides:
  - Mock HTTP transport for httpx (intercepts all requests)
  - A fixture factory that wires the transport into a client
  - JSON fixture loading relative to the requesting test module
  - A fast-retry ClientConfig so transport retry tests don't sleep
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
from apiclient_shared import ClientConfig


class MockTransport(httpx.AsyncBaseTransport):
    """Mock HTTP transport that returns preconfigured responses.

    Usage:
        transport = MockTransport(responses=[
            httpx.Response(200, json={"_results": [...]}),
        ])
        client = FrontClient("token", transport=transport)

    Each call to handle_async_request pops the next entry from the list. An
    entry that is an exception instance is raised instead of returned, which
    simulates a transport failure. If the list is exhausted, returns a 500.
    """

    def __init__(self, responses: list[httpx.Response | Exception] | None = None) -> None:
        self.responses = list(responses or [])
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            response.stream = httpx.ByteStream(response.content)
            return response
        return httpx.Response(500, json={"error": "No more mock responses"})

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        """Decoded JSON body of the most recent request."""
        return json.loads(self.last_request.content)


@pytest.fixture
def fast_config() -> ClientConfig:
    """Client config with zero backoff between transport retries."""
    return ClientConfig(retry_wait_min=0, retry_wait_max=0)


@pytest.fixture
def mock_transport() -> Callable[..., MockTransport]:
    """Factory: mock_transport(httpx.Response(...), ...) -> MockTransport."""

    def _make(*responses: httpx.Response | Exception) -> MockTransport:
        return MockTransport(responses=list(responses))

    return _make


@pytest.fixture
def load_fixture(request: pytest.FixtureRequest) -> Callable[[str], Any]:
    """Load a JSON file from the requesting test module's fixtures/ directory."""
    fixtures_dir = Path(request.path).parent / "fixtures"

    def _load(name: str) -> Any:
        return json.loads((fixtures_dir / name).read_text())

    return _load
