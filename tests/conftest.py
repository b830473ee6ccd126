"""Shared fixtures: isolated environment and a recording HTTP transport."""

import json
from typing import Any

import httpx
import pytest

from etsy_mcp.config.base import Settings
from etsy_mcp.config.etsy import EtsyConfig
from etsy_mcp.servers.etsy.server import build_registry
from etsy_mcp.tools.dispatcher import Dispatcher
from etsy_mcp.utils.etsy import EtsyClient

ENV_VARS = ("ETSY_API_KEY", "ETSY_SHOP_ID", "ETSY_ACCESS_TOKEN", "ETSY_BASE_URL")


class RecordingTransport(httpx.MockTransport):
    """MockTransport that records every request and answers with a canned response."""

    def __init__(
        self,
        status_code: int = 200,
        body: Any = None,
        error: Exception | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = {"ok": True} if body is None else body
        self.error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.status_code == 204:
            return httpx.Response(204)
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Tests never see credentials from the developer's shell."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def empty_env():
    """Settings with no environment values and no .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def read_only_config():
    return EtsyConfig(api_key="test-key")


@pytest.fixture
def authorized_config():
    return EtsyConfig(api_key="test-key", access_token="test-token")


def _dispatcher(config: EtsyConfig, transport: httpx.MockTransport) -> Dispatcher:
    return Dispatcher(config, EtsyClient(config, transport=transport), build_registry())


@pytest.fixture
def dispatcher(read_only_config, transport):
    """Dispatcher with an API key only (read operations)."""
    return _dispatcher(read_only_config, transport)


@pytest.fixture
def authorized_dispatcher(authorized_config, transport):
    """Dispatcher with an API key and an OAuth token."""
    return _dispatcher(authorized_config, transport)


@pytest.fixture
def other_transport():
    """Second, independent transport."""
    return RecordingTransport()
