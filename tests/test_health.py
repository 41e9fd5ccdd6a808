"""
Tests for the health check and the catch-all 404 responder.
"""

import pytest
from flask.testing import FlaskClient


def test_health(client: FlaskClient) -> None:
    """GET /api/health works"""
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert "application/json" in resp.headers["Content-Type"]
    assert resp.json == {"success": True, "payload": "API is running correctly"}


def test_unknown_path(client: FlaskClient) -> None:
    resp = client.get("/non-existent-path")
    assert resp.status_code == 404
    assert "application/json" in resp.headers["Content-Type"]
    assert resp.json == {
        "success": False,
        "reason": "No resource found at /non-existent-path, please re-check the path and try again.",
    }


@pytest.mark.parametrize(
    "method, path",
    [
        ("put", "/api/users/1"),
        ("patch", "/api/users/1"),
        ("post", "/api/users/1"),
        ("delete", "/api/users"),
        ("post", "/api/health"),
    ],
)
def test_unsupported_method_is_not_found(client: FlaskClient, method: str, path: str) -> None:
    """Known paths with an unsupported method get the catch-all reply"""
    resp = getattr(client, method)(path)
    assert resp.status_code == 404
    assert resp.json is not None
    assert resp.json["success"] == False
    assert resp.json["reason"] == (
        f"No resource found at {path}, please re-check the path and try again."
    )


def test_non_integer_id_is_not_found(client: FlaskClient) -> None:
    resp = client.get("/api/users/abc")
    assert resp.status_code == 404
    assert resp.json is not None
    assert resp.json["reason"].startswith("No resource found at /api/users/abc")
