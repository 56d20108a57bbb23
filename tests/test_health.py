"""Tests for the health check endpoint."""

from fastapi.testclient import TestClient


def test_health_check_empty_store(client: TestClient) -> None:
    """Test that health check reports the version and an empty store."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "1.0.0", "todos": 0}


def test_health_check_counts_todos(client: TestClient, payload) -> None:
    """Test that health check follows adds and deletes."""
    client.post("/todos", json=payload(1))
    client.post("/todos", json=payload(2))
    client.delete("/todos/1")

    assert client.get("/health").json()["todos"] == 1
