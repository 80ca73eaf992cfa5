"""Shared fixtures: a NetAccessClient whose HTTP traffic is served by a stub."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from netaccess.client.client import NetAccessClient
from netaccess.config import Settings

GRAPHQL_URL = "https://test.netaccess.io/api/graphql/"


class GraphQLStub:
    """Serves queued responses in order and records every request body."""

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.headers: list[httpx.Headers] = []
        self._queue: list[tuple[int, str] | str] = []

    # ------------------------------------------------------------------
    # Queueing
    # ------------------------------------------------------------------

    def respond(self, body: str | dict[str, Any], status_code: int = 200) -> None:
        text = body if isinstance(body, str) else json.dumps(body)
        self._queue.append((status_code, text))

    def respond_envelope(
        self,
        field: str,
        entity: dict[str, Any] | None = None,
        *,
        ok: bool = True,
        error: str | None = None,
        **extra: Any,
    ) -> None:
        payload: dict[str, Any] = {"ok": ok, "error": error, **extra}
        if entity is not None:
            payload["entity"] = entity
        self.respond({"data": {field: payload}})

    def respond_entity(self, field: str, node: dict[str, Any] | None) -> None:
        self.respond({"data": {field: node}})

    def respond_edges(self, field: str, nodes: list[dict[str, Any]]) -> None:
        self.respond({"data": {field: {"edges": [{"node": node} for node in nodes]}}})

    def fail(self, message: str) -> None:
        self._queue.append(message)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def calls(self) -> int:
        return len(self.requests)

    def operations(self) -> list[str]:
        """Name of the GraphQL operation sent with each request, in order."""
        names = []
        for body in self.requests:
            header = body["query"].strip().split("(")[0].split("{")[0]
            names.append(header.split()[1])
        return names

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        self.headers.append(request.headers)
        if not self._queue:
            raise AssertionError("unexpected GraphQL request")
        item = self._queue.pop(0)
        if isinstance(item, str):
            raise httpx.ConnectError(item, request=request)
        status_code, text = item
        return httpx.Response(status_code, text=text, request=request)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_token="test-token", network="test", url="netaccess.io", endpoint="")


@pytest.fixture
def stub() -> GraphQLStub:
    return GraphQLStub()


@pytest.fixture
def client(settings: Settings, stub: GraphQLStub) -> NetAccessClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(stub.handler))
    return NetAccessClient(settings, http_client=http_client)
