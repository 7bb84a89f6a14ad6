"""Fixtures compartidas: transporte httpx simulado con `MockTransport`."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from atlassian_rest import AuthenticationService

SITE = "https://x.atlassian.net/"


class Recorder:
    """Handler de `httpx.MockTransport` que guarda las peticiones recibidas."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status = 200
        self._content = b""
        self._headers: dict[str, str] = {}

    def reply(self, status: int = 200, json_body: Any = None, content: bytes | None = None) -> Recorder:
        self._status = status
        if json_body is not None:
            self._content = json.dumps(json_body).encode("utf-8")
            self._headers = {"Content-Type": "application/json"}
        else:
            self._content = content or b""
            self._headers = {}
        return self

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request reached the transport"
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return httpx.Response(self._status, headers=self._headers, content=self._content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def http(recorder: Recorder):
    client = httpx.Client(transport=httpx.MockTransport(recorder))
    yield client
    client.close()


@pytest.fixture
def make_http() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]:
    clients: list[httpx.Client] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def auth() -> AuthenticationService:
    service = AuthenticationService()
    service.set_basic_auth("bot@example.com", "token-123")
    service.set_user_agent("atlassian-rest-tests/1.0")
    return service
