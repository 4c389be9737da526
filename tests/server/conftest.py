"""Pytest fixtures for server module testing."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from server.broadcaster import subscriber_count
from server.main import app


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def no_leaked_subscribers() -> Iterator[None]:
    yield
    assert subscriber_count() == 0
