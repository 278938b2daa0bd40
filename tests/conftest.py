"""Pytest configuration and shared fixtures.

This module provides:
- Deterministic id generator and clock
- In-memory registry for operation tests
- FastAPI test client over a temporary SQLite database
"""

import itertools

import pytest
from fastapi.testclient import TestClient

from factories import PROVIDER, service_payload
from service_hub_api.app.core.config import Settings
from service_hub_api.app.main import create_app
from service_hub_api.app.registry import memory_registry, sqlite_registry


class SequentialIds:
    """Ids ``<prefix>-0001``, ``<prefix>-0002``... in creation order."""

    def __init__(self, prefix: str = "id") -> None:
        self._counter = itertools.count(1)
        self.prefix = prefix

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter):04d}"


class FakeClock:
    """Clock advancing by ``step`` nanoseconds on every read."""

    def __init__(self, start: int = 1_700_000_000_000_000_000, step: int = 1_000) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        self.now += self.step
        return self.now


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def registry(ids, clock):
    return memory_registry(id_factory=ids, clock=clock)


@pytest.fixture
def service(registry):
    """A stored service owned by ``PROVIDER``."""
    return registry.catalog.add_service(service_payload(), PROVIDER).unwrap()


@pytest.fixture
def db_settings(tmp_path) -> Settings:
    return Settings(database_url=str(tmp_path / "service_hub.db"))


@pytest.fixture
def client(db_settings):
    app = create_app(db_settings, registry=sqlite_registry(db_settings))
    with TestClient(app) as test_client:
        yield test_client
