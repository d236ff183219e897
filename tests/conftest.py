"""Fixtures: in-memory storage, a store over it, and an HTTP client."""

import pytest
from fastapi.testclient import TestClient

from workout_logger.core.config import Settings
from workout_logger.main import create_application
from workout_logger.storage.memory import InMemoryKeyValueStorage
from workout_logger.store.workout_store import WorkoutStore


@pytest.fixture
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def store(storage) -> WorkoutStore:
    return WorkoutStore(storage)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, seed_exercise_library=False)


@pytest.fixture
def client(settings, storage):
    app = create_application(settings=settings, storage=storage)
    with TestClient(app) as c:
        yield c
