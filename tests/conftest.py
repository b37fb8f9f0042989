"""
Shared pytest fixtures.

Every test gets its own application backed by a fresh SQLite file, so no
state leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from pickup.config import Settings
from pickup.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'soccer.db'}")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient with the lifespan running, so tables exist."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db(client):
    session = client.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def create_game(client):
    """Create a game through the admin API and return its id."""
    def _create(**overrides):
        payload = {
            "title": "Sunday Pickup",
            "date": "2025-06-01",
            "time": "10:00",
            "location": "Riverside Park",
            "cost": 5.00,
            "max_players": 10,
        }
        payload.update(overrides)
        response = client.post("/api/admin/games", json=payload)
        assert response.status_code == 200
        return response.json()["id"]
    return _create


@pytest.fixture
def signup_payload():
    def _payload(name="Alex", **overrides):
        payload = {
            "name": name,
            "position": "Midfielder",
            "age": 28,
            "speed": 3,
            "passing": 4,
            "shooting": 5,
            "defending": 2,
        }
        payload.update(overrides)
        return payload
    return _payload
