"""API conftest — TestClient bound to a fresh store per test."""

import pytest
from fastapi.testclient import TestClient

from appmeta.core.dependencies import get_store
from appmeta.domain.entities import ApplicationStore
from appmeta.main import app


@pytest.fixture
def api_store():
    return ApplicationStore()


@pytest.fixture
def client(api_store):
    app.dependency_overrides[get_store] = lambda: api_store
    yield TestClient(app)
    app.dependency_overrides.clear()
