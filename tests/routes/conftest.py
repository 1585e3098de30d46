"""API test fixtures - fresh movie collection per test + FastAPI test client."""

import pytest
from fastapi.testclient import TestClient

from movie_store.settings import Settings
from api.dependencies import AppState, get_app_state
from api.main import app


@pytest.fixture
def settings():
    return Settings(_env_file=None, random_seed=1234, seed_movies=True)


@pytest.fixture
def state(settings):
    fresh = AppState()
    fresh.initialize(settings)
    return fresh


@pytest.fixture
def client(state):
    """Test client whose requests all see the `state` fixture."""
    app.dependency_overrides[get_app_state] = lambda: state
    yield TestClient(app)
    app.dependency_overrides.clear()
