"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from app.config import get_settings
from app.services.measurement_form import get_measurement_validators


@pytest.fixture(autouse=True)
def reset_cached_settings():
    """Clear cached settings and validators before and after each test.

    Both are built once per process; clearing them makes environment
    variables set with monkeypatch take effect.
    """
    get_settings.cache_clear()
    get_measurement_validators.cache_clear()
    yield
    get_settings.cache_clear()
    get_measurement_validators.cache_clear()


@pytest.fixture()
def client():
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
