"""Pytest configuration and fixtures for catalog client tests."""

import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest_asyncio

from bigcommerce_catalog import BigCommerceClient

STORE_HASH = "abc123"
AUTH_TOKEN = "test-token"
BASE_URL = f"https://api.bigcommerce.com/stores/{STORE_HASH}/v3/"

Responder = Callable[[httpx.Request], httpx.Response]


def envelope(data: Any, **meta: Any) -> dict[str, Any]:
    """Build a {"data", "meta"} response body."""
    return {"data": data, "meta": meta}


class FakeStore:
    """Records every request and answers through a responder.

    The default responder echoes an empty record so create/update calls
    decode without extra setup.
    """

    def __init__(self, responder: Responder | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.responder = responder or (
            lambda request: httpx.Response(200, json=envelope({"id": 1}))
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        """Decode the body of the most recent request."""
        return json.loads(self.last.content)

    def last_path(self) -> str:
        """Path of the most recent request relative to the store base URL."""
        return self.last.url.path.removeprefix(f"/stores/{STORE_HASH}/v3/")


@pytest_asyncio.fixture
async def make_client() -> AsyncIterator[Callable[[FakeStore], BigCommerceClient]]:
    """Create clients wired to fake stores; closed after the test."""
    clients: list[BigCommerceClient] = []

    def factory(store: FakeStore) -> BigCommerceClient:
        client = BigCommerceClient(
            STORE_HASH, AUTH_TOKEN, transport=httpx.MockTransport(store)
        )
        clients.append(client)
        return client

    yield factory

    for client in clients:
        await client.close()
