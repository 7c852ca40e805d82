"""Store failures surface as 500 responses carrying the driver message."""

import pytest
from fastapi.testclient import TestClient

from usuarios_api.app.main import app


@pytest.fixture
def failing_client(broken_store):
    return TestClient(app)


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("GET", "/api/usuarios", None),
        ("GET", "/api/usuarios/1", None),
        ("POST", "/api/usuarios", {"nombre": "Ana", "email": "ana@x.com"}),
        ("PUT", "/api/usuarios/1", {"nombre": "Ana", "telefono": "1", "email": "ana@x.com"}),
        ("DELETE", "/api/usuarios/1", None),
    ],
)
def test_unreachable_store_yields_500(failing_client, method, path, body):
    response = failing_client.request(method, path, json=body)

    assert response.status_code == 500
    payload = response.json()
    assert set(payload) == {"error"}
    assert payload["error"]


def test_validation_happens_before_store_access(failing_client):
    response = failing_client.post("/api/usuarios", json={"telefono": "123"})

    assert response.status_code == 400
    assert response.json() == {"message": "Nombre y email son obligatorios"}
