import json
from collections.abc import Callable

import httpx
import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from token_feed.container import Container
from token_feed.db import FeedStore
from token_feed.main import create_app
from token_feed.providers import JupiterProvider, VybeProvider


class FakeUpstream:
    """Callable for httpx.MockTransport: canned responses keyed by (method, path)."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status_code: int = 200, json_body=None) -> None:
        self.routes[(method, path)] = lambda _: httpx.Response(status_code, json=json_body)

    def add_handler(self, method: str, path: str, handler) -> None:
        self.routes[(method, path)] = handler

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"error": "not found"})
        return handler(request)


@pytest.fixture
def store():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    feed_store = FeedStore(engine)
    feed_store.init_db()
    yield feed_store
    feed_store.dispose()


@pytest.fixture
def jupiter_upstream():
    return FakeUpstream()


@pytest.fixture
def vybe_upstream():
    return FakeUpstream()


@pytest.fixture
def jupiter(jupiter_upstream):
    client = httpx.AsyncClient(
        base_url="https://jupiter.test", transport=httpx.MockTransport(jupiter_upstream)
    )
    return JupiterProvider(client=client)


@pytest.fixture
def vybe(vybe_upstream):
    client = httpx.AsyncClient(
        base_url="https://vybe.test", transport=httpx.MockTransport(vybe_upstream)
    )
    return VybeProvider(api_key="test-key", client=client)


@pytest.fixture
def container(store, jupiter, vybe):
    c = Container()
    c.store.override(providers.Object(store))
    c.jupiter_provider.override(providers.Object(jupiter))
    c.vybe_provider.override(providers.Object(vybe))
    yield c
    c.reset_override()


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as test_client:
        yield test_client
