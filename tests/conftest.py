"""Shared fixtures for the CRUD demo tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from crud_demo_api.app.main import app
from crud_demo_client import DemoAPIClient


@pytest.fixture
def client() -> Iterator[TestClient]:
    """HTTP client bound to the in-process app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_client(client: TestClient) -> DemoAPIClient:
    """Demo client that talks to the in-process app through ``TestClient``."""
    return DemoAPIClient(base_url=str(client.base_url), session=client)
