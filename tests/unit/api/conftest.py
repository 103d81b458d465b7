import pytest
from fastapi.testclient import TestClient
from pytest import MonkeyPatch

from linkshortener.api import create_app
from linkshortener.dao.memory import ShortURLMemoryDAO
from linkshortener.store import ShortURLStore
from linkshortener.utils.config import ShortenerConfig


@pytest.fixture
def config() -> ShortenerConfig:
    return ShortenerConfig(base_url='https://sho.rt')


@pytest.fixture
def store(config: ShortenerConfig) -> ShortURLStore:
    return ShortURLStore(ShortURLMemoryDAO(), config)


@pytest.fixture
def app(store: ShortURLStore, config: ShortenerConfig):
    return create_app(store, config)


@pytest.fixture
def client(app, monkeypatch: MonkeyPatch) -> TestClient:
    """Test client that never follows redirects (redirects are under test)."""
    monkeypatch.setattr('linkshortener.utils.helpers.running_locally', lambda: False)
    return TestClient(app, follow_redirects=False)
