import pytest
from fastapi.testclient import TestClient

from fitsync.main import app
from fitsync.models.profile import Profile


def make_profile(**overrides) -> Profile:
    base = {
        "id": "user-1",
        "name": "Alex",
        "fitness_level": "beginner",
        "weight_kg": 70,
        "height_cm": 170,
        "age": 30,
        "sex": "female",
        "activity_level": "moderate",
        "goals": [],
        "total_workouts": 0,
        "streak_days": 0,
    }
    base.update(overrides)
    return Profile(**base)


@pytest.fixture
def profile() -> Profile:
    return make_profile()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
