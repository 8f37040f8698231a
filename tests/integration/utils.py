from typing import Any
from fastapi.testclient import TestClient


def create_task(client: TestClient, **overrides: Any) -> dict[str, Any]:
    """Helper to create a task through the API and return its JSON body."""

    payload: dict[str, Any] = {
        "title": "Sample task",
        "start_date": "2024-01-02",
        "due_date": "2024-01-05",
    }
    payload.update(overrides)

    response = client.post("/tasks", json=payload)
    assert response.status_code == 201, response.text
    return response.json()
