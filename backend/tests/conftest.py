import pytest
from fastapi.testclient import TestClient

from fakes import FakeTokenClient
from prtfaucet.deps import get_token_client
from prtfaucet.main import app


@pytest.fixture
def fake_client():
    return FakeTokenClient()


@pytest.fixture
def api(fake_client):
    app.dependency_overrides[get_token_client] = lambda: fake_client
    yield TestClient(app)
    app.dependency_overrides.clear()
