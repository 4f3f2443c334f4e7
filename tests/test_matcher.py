"""Unit tests for auth/matcher.py -- which paths the gate never sees."""

from __future__ import annotations

import pytest

from auth.matcher import RouteMatcher


@pytest.fixture
def matcher() -> RouteMatcher:
    return RouteMatcher()


@pytest.mark.parametrize(
    "path",
    [
        "/_next/static/chunks/main.js",
        "/_next/static/css/app.css",
        "/_next/image",
        "/_next/image/photo.png",
        "/favicon.ico",
    ],
)
def test_static_and_image_paths_are_skipped(matcher: RouteMatcher, path: str) -> None:
    assert not matcher.should_intercept(path)


@pytest.mark.parametrize(
    "path",
    [
        "/",
        "/login",
        "/assets",
        "/dashboard/assets",
        "/api/v1/health",
        "/_next/data/build-id/index.json",
        "/static/_next/static/app.js",
    ],
)
def test_everything_else_is_intercepted(matcher: RouteMatcher, path: str) -> None:
    assert matcher.should_intercept(path)


def test_newline_in_path_is_still_intercepted(matcher: RouteMatcher) -> None:
    """A decoded %0A must not let a protected path slip past the gate."""
    assert matcher.should_intercept("/assets\n")


def test_custom_expression_matches_whole_path() -> None:
    matcher = RouteMatcher.from_expression(r"/app(/.*)?")
    assert matcher.should_intercept("/app")
    assert matcher.should_intercept("/app/settings")
    assert not matcher.should_intercept("/application")
    assert not matcher.should_intercept("/")
