"""
Pytest config.

Tests never touch the network: every client is built over an `httpx.MockTransport`
whose handler the test provides. Environment variables and `.env` files are
isolated so local developer config can't leak into assertions.
"""

from __future__ import annotations

import json
import os
from typing import Callable

import httpx
import pytest

from yggdrasil_auth.adapters.yggdrasil_client import YggdrasilClient
from yggdrasil_auth.core.config import AppSettings

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for key in list(os.environ):
        if key.upper().startswith("YGGDRASIL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def make_client(settings: AppSettings):
    """Factory: `make_client(handler, **kwargs)` -> `YggdrasilClient` over a mock transport."""

    created: list[YggdrasilClient] = []

    def _make(handler: Handler, **kwargs) -> YggdrasilClient:
        kwargs.setdefault("client_token", "CT0")
        client = YggdrasilClient(settings, transport=httpx.MockTransport(handler), **kwargs)
        created.append(client)
        return client

    yield _make

    for client in created:
        client.close()


class Recorder:
    """Records requests and answers each path with a canned `(status, body)` pair."""

    def __init__(self, routes: dict[str, tuple[int, bytes]]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes[request.url.path]
        return httpx.Response(status, content=body)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recorder():
    return Recorder
