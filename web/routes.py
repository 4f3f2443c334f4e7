"""
web/routes.py -- Jinja2 template routes for the net-worth dashboard shell.

None of these handlers check authentication themselves. AuthGateMiddleware
has already decided by the time a handler runs: protected pages are only
reached with a session cookie present, and /login is only reached without one.

Routes:
  GET  /            -- dashboard (protected)
  GET  /dashboard   -- 301 to / (bookmark compatibility)
  GET  /assets      -- assets overview (protected)
  GET  /login       -- login form (public)
  POST /logout      -- clear the session cookie, 303 to /login
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from core.config import get_settings

logger = logging.getLogger("networth.web")

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def dashboard(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"heading": "Portfolio overview", "section": "overview"},
    )


@router.get("/dashboard")
def dashboard_redirect() -> RedirectResponse:
    return RedirectResponse("/", status_code=301)


@router.get("/assets", response_class=HTMLResponse)
def assets(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"heading": "Assets", "section": "assets"},
    )


@router.get("/login", response_class=HTMLResponse)
def login_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "login.html",
        {"api_login_url": get_settings().backend_login_url},
    )


@router.post("/logout")
def logout(request: Request) -> RedirectResponse:
    """Clear the session cookie and redirect to the login page.

    303 so the browser follows with GET rather than re-POSTing to /login.
    """
    settings = get_settings()
    resp = RedirectResponse(settings.login_path, status_code=303)
    resp.delete_cookie(settings.session_cookie_name, secure=settings.secure_cookies, httponly=True)
    logger.info("Session cookie cleared for %s", request.client.host if request.client else "unknown")
    return resp
