from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_event_bus, get_registry

from contentgraph.config.settings import RegistryConfig
from contentgraph.events.event_bus import EventBus
from contentgraph.graph.graph_store import GraphStore

OWNER = "0xowner"
C1 = "0xc1"
C2 = "0xc2"


class FakeClock:
    def __init__(self, start: int = 1_700_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int = 1) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def store(clock: FakeClock, bus: EventBus) -> GraphStore:
    return GraphStore(RegistryConfig(initial_owner=OWNER, clock=clock), events=bus)


@pytest.fixture()
def client(store: GraphStore, bus: EventBus):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    app = create_app(AppConfig())
    app.router.lifespan_context = _no_lifespan

    app.dependency_overrides[get_registry] = lambda: store
    app.dependency_overrides[get_event_bus] = lambda: bus
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
