from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from schema2api.main import create_app
from schema2api.runtime.schema_store import SchemaStore

USER_SCHEMA = {
    "title": "User",
    "type": "object",
    "properties": {
        "id": {"type": "integer"},
        "name": {"type": "string"},
        "email": {"type": "string"},
    },
    "required": ["id", "name", "email"],
}


@pytest.fixture
def store() -> SchemaStore:
    return SchemaStore()


@pytest.fixture
def client(store) -> TestClient:
    return TestClient(create_app(store))


@pytest.fixture
def user_client(client) -> TestClient:
    resp = client.post("/upload", content=json.dumps(USER_SCHEMA))
    assert resp.status_code == 200
    return client
