"""Tests for the catch-all 404 route."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/"),
        ("GET", "/does/not/exist"),
        ("POST", "/greet"),
        ("GET", "/shout/hello"),
        ("PUT", "/math/average"),
        ("PATCH", "/secure/resource"),
        ("GET", "/greet/"),
    ],
)
def test_unmatched_requests_get_endpoint_directory(client: TestClient, method: str, path: str) -> None:
    response = client.request(method, path)

    assert response.status_code == 404
    data = response.json()
    assert data["error"] == "Route not found."
    assert [(e["method"], e["path"]) for e in data["endpoints"]] == [
        ("GET", "/greet"),
        ("POST", "/math/average"),
        ("PUT", "/shout/:word"),
        ("DELETE", "/secure/resource"),
    ]


@pytest.mark.parametrize("method", ["TRACE", "PURGE"])
def test_uncommon_methods_get_endpoint_directory(client: TestClient, method: str) -> None:
    response = client.request(method, "/nowhere")

    assert response.status_code == 404
    data = response.json()
    assert data["error"] == "Route not found."
    assert len(data["endpoints"]) == 4
