import pytest
from fastapi.testclient import TestClient

from fisher_yates.app.main import create_app
from fisher_yates.core.settings import Settings


@pytest.fixture
def make_client():
    def _make(**overrides) -> TestClient:
        cfg = Settings(_env_file=None, **overrides)
        return TestClient(create_app(cfg))
    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
