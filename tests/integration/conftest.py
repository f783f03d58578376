"""Fixtures for API integration tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from plaidicons.api.main import app
from plaidicons.core.config import PlaidiconsSettings
from plaidicons.core.generator import IconGenerator


@pytest.fixture
def test_client(test_settings: PlaidiconsSettings) -> Generator[TestClient, None, None]:
    """TestClient whose generator uses small test-friendly sizes.

    The lifespan runs on entering the client; the generator it creates is
    then replaced with one bound to the test settings.
    """
    api_settings = test_settings.model_copy(update={"default_size": 64, "max_size": 512})
    with TestClient(app) as client:
        app.state.generator = IconGenerator(api_settings)
        yield client
