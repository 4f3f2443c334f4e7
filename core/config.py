"""
core/config.py -- Centralized application configuration via pydantic-settings.

All environment variable reads for the net-worth edge service happen here. No
module should call os.getenv() or os.environ.get() directly -- import
get_settings() instead.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call. This is
      the official FastAPI dependency injection pattern for config.

  BaseSettings (pydantic-settings): Reads values from environment variables
      and an optional .env file automatically. Field names map to env var names
      (e.g. login_path -> LOGIN_PATH). List fields are read as JSON
      (PUBLIC_PATH_PREFIXES='["/login", "/api"]').

  @model_validator(mode="after"): Cross-field validation once every field is
      resolved. The login path must itself be public, otherwise an anonymous
      request to /login would be redirected to /login forever.

Layer rule: core/ is the kernel. This module may not import from api/, web/,
or auth/.
"""

import logging
import re
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("networth.config")

DEFAULT_PUBLIC_PATH_PREFIXES: tuple[str, ...] = (
    "/login",
    "/register",
    "/reset-password",
    "/auth/reset-password",
    "/auth/magic-login",
    "/auth/reset",
    "/_next",
    "/api",
    "/favicon.ico",
)

# Every path is intercepted except static bundles, optimized images and the favicon.
DEFAULT_GATE_MATCHER = r"/((?!_next/static|_next/image|favicon\.ico).*)"

_REDIRECT_STATUSES = {301, 302, 303, 307, 308}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    All fields have defaults so Settings() can be instantiated in test
    environments without a real .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    log_level: str = "INFO"

    # ------------------------------------------------------------------
    # Authorization gate
    # ------------------------------------------------------------------

    # Only the presence of this cookie is checked; the API layer validates it.
    session_cookie_name: str = "token"
    login_path: str = "/login"
    home_path: str = "/"
    public_path_prefixes: list[str] = list(DEFAULT_PUBLIC_PATH_PREFIXES)
    gate_matcher: str = DEFAULT_GATE_MATCHER
    redirect_status_code: int = 307

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    secure_cookies: bool = False
    # The login form posts here; the backend issues the token cookie.
    backend_login_url: str = "/api/auth/login"
    allowed_hosts: list[str] = ["localhost", "127.0.0.1", "*.localhost"]
    cors_origins: list[str] = ["http://localhost", "http://localhost:3000", "http://127.0.0.1"]

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @field_validator("login_path", "home_path")
    @classmethod
    def validate_absolute_path(cls, value: str) -> str:
        """Redirect targets must be server-local absolute paths, never URLs."""
        if not value.startswith("/") or value.startswith("//"):
            raise ValueError(f"path must start with a single '/', got {value!r}")
        return value

    @field_validator("public_path_prefixes")
    @classmethod
    def validate_prefixes(cls, value: list[str]) -> list[str]:
        """Reject empty prefixes -- '' would make every path public."""
        for prefix in value:
            if not prefix.startswith("/"):
                raise ValueError(f"public path prefix must start with '/', got {prefix!r}")
        return value

    @field_validator("gate_matcher")
    @classmethod
    def validate_matcher(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"gate_matcher is not a valid regular expression: {e}") from e
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level

    @field_validator("redirect_status_code")
    @classmethod
    def validate_redirect_status(cls, value: int) -> int:
        if value not in _REDIRECT_STATUSES:
            raise ValueError(f"redirect_status_code must be one of {sorted(_REDIRECT_STATUSES)}")
        return value

    @model_validator(mode="after")
    def validate_login_is_public(self) -> "Settings":
        """Refuse to start with a login page the gate would itself protect.

        If no public prefix covers login_path, an anonymous visitor is sent to
        /login, which is protected, which sends them to /login again.
        """
        if not any(self.login_path.startswith(p) for p in self.public_path_prefixes):
            raise ValueError(
                f"login_path {self.login_path!r} is not covered by any public path prefix. "
                "Add it to PUBLIC_PATH_PREFIXES to avoid a redirect loop."
            )
        if self.debug:
            logger.warning("DEBUG is enabled -- do not run this configuration in production.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    return Settings()
