"""
tests/conftest.py -- Shared test fixtures for the net-worth edge service.

This module provides:
  - web_client: TestClient with follow_redirects=False for gate/route tests
  - api_client: TestClient with default redirect handling for JSON endpoints
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from asgi import app

SESSION_TOKEN = "header.payload.signature"
# A host from the default ALLOWED_HOSTS, so TrustedHostMiddleware accepts test requests.
BASE_URL = "http://localhost"


@pytest.fixture(scope="module")
def web_client() -> Generator[tuple[TestClient, str], None, None]:
    """Yield (client, token) for web route integration tests.

    follow_redirects=False is essential: we assert on redirect *locations*
    (e.g. 307 to /login), which are invisible once the client follows the
    redirect and returns the final 200 response.
    """
    with TestClient(app, base_url=BASE_URL, follow_redirects=False, raise_server_exceptions=True) as client:
        yield client, SESSION_TOKEN


@pytest.fixture(scope="module")
def api_client() -> Generator[TestClient, None, None]:
    with TestClient(app, base_url=BASE_URL, raise_server_exceptions=True) as client:
        yield client
