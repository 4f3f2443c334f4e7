"""
auth/middleware.py -- Starlette middleware that applies the authorization gate.

Pipeline per request (outermost first):
  1. RouteMatcher -- skip the gate entirely for static/image/favicon paths.
  2. Credential lookup -- presence of the session cookie, nothing more.
  3. AuthGate.evaluate() -- CONTINUE or a redirect target.

A redirect is returned immediately and the route handler never runs. CONTINUE
hands the request to call_next() unmodified.

Cookie values are never logged. The only thing this layer knows about the
token is that it exists.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from auth.gate import AuthGate, PublicPathRules
from auth.matcher import RouteMatcher
from core.config import Settings

logger = logging.getLogger("networth.gate")


def has_session_credential(cookies: Mapping[str, str], cookie_name: str = "token") -> bool:
    """Return True if the named cookie is present with a non-empty value.

    Starlette drops cookie pairs it cannot parse, so a malformed Cookie header
    simply yields no credential here.
    """
    return bool(cookies.get(cookie_name))


class AuthGateMiddleware(BaseHTTPMiddleware):
    """Redirect anonymous visitors to the login page and signed-in visitors away from it."""

    def __init__(
        self,
        app: ASGIApp,
        gate: Optional[AuthGate] = None,
        matcher: Optional[RouteMatcher] = None,
        cookie_name: str = "token",
        redirect_status_code: int = 307,
    ) -> None:
        super().__init__(app)
        self.gate = gate or AuthGate()
        self.matcher = matcher or RouteMatcher()
        self.cookie_name = cookie_name
        self.redirect_status_code = redirect_status_code

    @classmethod
    def options_from_settings(cls, settings: Settings) -> dict:
        """Keyword arguments for app.add_middleware(AuthGateMiddleware, **options)."""
        return {
            "gate": AuthGate(
                public_paths=PublicPathRules.from_prefixes(settings.public_path_prefixes),
                login_path=settings.login_path,
                home_path=settings.home_path,
            ),
            "matcher": RouteMatcher.from_expression(settings.gate_matcher),
            "cookie_name": settings.session_cookie_name,
            "redirect_status_code": settings.redirect_status_code,
        }

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if not self.matcher.should_intercept(path):
            return await call_next(request)

        has_credential = has_session_credential(request.cookies, self.cookie_name)
        result = self.gate.evaluate(path, has_credential)
        if result.is_redirect:
            logger.info("%s %s -> %s (%s)", request.method, path, result.target, result.decision.value)
            return RedirectResponse(result.target, status_code=self.redirect_status_code)

        logger.debug("%s %s passed gate (credential=%s)", request.method, path, has_credential)
        return await call_next(request)
