"""Pytest fixtures."""

import httpx
import pytest

from amap_tools.adapters.amap import AmapClientWrapper, build_registry
from amap_tools.dispatcher import ToolDispatcher


@pytest.fixture
def api_key():
    """Mock AMap key."""
    return "test_amap_key_12345"


@pytest.fixture
def upstream_requests():
    """Requests seen by the mocked upstream."""
    return []


@pytest.fixture
def make_client(api_key):
    """Build an AmapClientWrapper over an httpx MockTransport handler."""

    def _make(handler):
        return AmapClientWrapper(api_key=api_key, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def ok_client(make_client, upstream_requests):
    """Client whose upstream always answers 200 {"status": "1"}."""

    def handler(request: httpx.Request) -> httpx.Response:
        upstream_requests.append(request)
        return httpx.Response(200, json={"status": "1"})

    return make_client(handler)


@pytest.fixture
def failing_client(make_client, upstream_requests):
    """Client whose upstream refuses every connection."""

    def handler(request: httpx.Request) -> httpx.Response:
        upstream_requests.append(request)
        raise httpx.ConnectError("Connection refused", request=request)

    return make_client(handler)


@pytest.fixture
def coordinate_registry():
    return build_registry("coordinate")


@pytest.fixture
def route_registry():
    return build_registry("route")


@pytest.fixture
def coordinate_dispatcher(coordinate_registry, ok_client):
    return ToolDispatcher(coordinate_registry, ok_client)


@pytest.fixture
def route_dispatcher(route_registry, ok_client):
    return ToolDispatcher(route_registry, ok_client)
