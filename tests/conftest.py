"""Pytest fixtures for the products client and API tests."""

import copy
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from src.integrations.clients.real_http.dummyjson_products import DummyJSONProductsClient

UPSTREAM_URL = "http://dummyjson.test"

_LIST_ENVELOPE = {
    "products": [
        {"id": 1, "title": "iPhone 9", "price": 549},
        {"id": 2, "title": "iPhone X", "price": 899},
    ],
    "total": 2,
    "skip": 0,
    "limit": 2,
}


@pytest.fixture
def list_envelope():
    """Upstream list body with two products."""
    return copy.deepcopy(_LIST_ENVELOPE)


class RecordingUpstream:
    """httpx handler that records requests and answers with a canned callable."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture
def make_client():
    """Build a (client, upstream) pair backed by an in-process mock transport."""

    def _make(respond: Callable[[httpx.Request], httpx.Response]):
        upstream = RecordingUpstream(respond)
        client = DummyJSONProductsClient(base_url=UPSTREAM_URL, transport=httpx.MockTransport(upstream))
        return client, upstream

    return _make


@pytest.fixture
def make_api(make_client):
    """TestClient for the app with the products client swapped for a mocked one."""
    from src.api.endpoints.products import get_products_client
    from src.api.main import app

    def _make(respond: Callable[[httpx.Request], httpx.Response]):
        client, upstream = make_client(respond)
        app.dependency_overrides[get_products_client] = lambda: client
        return TestClient(app), upstream

    yield _make
    app.dependency_overrides.clear()
