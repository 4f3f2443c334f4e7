"""
tests/test_errors.py -- Error envelope returned by the exception handlers in api/main.py.

Every error response has the shape {"error": {"code", "message", "detail"}},
including the 404/405 responses the router raises before any handler runs.

The 422 and 500 cases use a bare FastAPI app wired with the same handlers, so
a route can fail on purpose without adding a failing route to the real app.
"""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.main import generic_exception_handler, http_exception_handler, validation_error_handler


def _make_failing_app() -> FastAPI:
    failing_app = FastAPI()
    failing_app.add_exception_handler(RequestValidationError, validation_error_handler)
    failing_app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    failing_app.add_exception_handler(Exception, generic_exception_handler)

    @failing_app.get("/boom")
    def boom() -> dict:
        raise RuntimeError("connection string postgres://admin:hunter2@db/networth")

    @failing_app.get("/holdings")
    def holdings(limit: int) -> dict:
        return {"limit": limit}

    return failing_app


class TestRoutingErrors:
    def test_unknown_route_uses_envelope(self, api_client: TestClient) -> None:
        """Unknown /api paths pass the gate and reach the router's 404."""
        resp = api_client.get("/api/v1/does-not-exist")
        assert resp.status_code == 404
        assert resp.json() == {"error": {"code": "http_404", "message": "Not Found", "detail": None}}

    def test_wrong_method_uses_envelope(self, web_client: tuple[TestClient, str]) -> None:
        client, token = web_client
        resp = client.get("/logout", cookies={"token": token})
        assert resp.status_code == 405
        body = resp.json()
        assert body["error"]["code"] == "http_405"
        assert body["error"]["message"] == "Method Not Allowed"
        assert "detail" not in body


class TestHandlerErrors:
    def test_validation_error_uses_envelope(self) -> None:
        client = TestClient(_make_failing_app())
        resp = client.get("/holdings", params={"limit": "many"})
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "validation_error"

    def test_unhandled_exception_returns_internal_error(self, caplog: pytest.LogCaptureFixture) -> None:
        client = TestClient(_make_failing_app(), raise_server_exceptions=False)
        with caplog.at_level(logging.ERROR, logger="networth.api"):
            resp = client.get("/boom")
        assert resp.status_code == 500
        assert resp.json() == {
            "error": {"code": "internal_error", "message": "An unexpected error occurred.", "detail": None}
        }
        assert any("Unhandled exception on GET /boom" in r.getMessage() for r in caplog.records)

    def test_exception_text_is_never_echoed(self) -> None:
        client = TestClient(_make_failing_app(), raise_server_exceptions=False)
        resp = client.get("/boom")
        assert "hunter2" not in resp.text
        assert "RuntimeError" not in resp.text
