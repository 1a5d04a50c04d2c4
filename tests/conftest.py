"""Shared test fixtures for Client Manager tests."""

import uuid
from unittest.mock import create_autospec

import pytest

from client_manager.domain.entities import Client
from client_manager.domain.repositories import ClientRepository
from client_manager.infrastructure.memory import InMemoryClientRepository


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def client():
    """A single client with a random id."""
    return Client(uuid.uuid4(), "Hanako", "Sapporo")


@pytest.fixture
def make_client():
    """Factory for clients with random ids and numbered fields."""
    counter = iter(range(1_000_000))

    def _make(name=None, location=None):
        n = next(counter)
        return Client(uuid.uuid4(), name or f"name-{n}", location or f"location-{n}")

    return _make


@pytest.fixture
def repository():
    """Empty in-memory repository."""
    return InMemoryClientRepository()


@pytest.fixture
def seeded_repository():
    """In-memory repository holding the Taro and Jiro sample clients."""
    return InMemoryClientRepository.with_sample_clients()


@pytest.fixture
def mock_repository():
    """Autospec double of the repository contract."""
    return create_autospec(ClientRepository, instance=True)
