"""Pytest fixtures for the Todo API tests."""

import pytest
from fastapi.testclient import TestClient

from todo_api.config import Settings
from todo_api.main import create_app
from todo_api.store import TaskStore

FUTURE = "2099-01-01T09:00:00Z"


@pytest.fixture
def store() -> TaskStore:
    """Create an empty task store."""
    return TaskStore()


@pytest.fixture
def client(store: TaskStore) -> TestClient:
    """Create a test client for an app that owns ``store``."""
    return TestClient(create_app(Settings(), store))


@pytest.fixture
def payload():
    """Build a JSON todo body that passes validation unless overridden."""

    def build(todo_id: int = 1, name: str = "Buy milk", **overrides: object) -> dict:
        body = {"id": todo_id, "name": name, "dueDate": FUTURE, "isCompleted": False}
        body.update(overrides)
        return body

    return build
