"""Root conftest — shared fixtures for domain and API tests."""

import pytest

from appmeta.domain.entities import ApplicationStore
from appmeta.domain.models import ApplicationMetadata, Maintainer


def make_application(**overrides) -> ApplicationMetadata:
    """Build a fully valid record, replacing any field given in overrides."""
    fields = {
        "title": "Valid App 1",
        "version": "0.0.1",
        "maintainers": [
            Maintainer(name="firstmaintainer app1", email="firstmaintainer@hotmail.com"),
        ],
        "company": "Random Inc.",
        "website": "https://website.com",
        "source": "https://github.com/random/repo",
        "license": "Apache-2.0",
        "description": "A really cool app.",
    }
    fields.update(overrides)
    return ApplicationMetadata(**fields)


@pytest.fixture
def store():
    return ApplicationStore()
