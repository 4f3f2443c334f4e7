"""
auth/gate.py -- Request authorization gate: public/protected routing decision.

The gate answers one question per inbound navigation request: let it through,
send the visitor to the login page, or send an already-signed-in visitor away
from the login page. It is a pure function of (path, credential presence):

  1. public    := path starts with any public-path prefix (case-sensitive)
  2. not public and no credential         -> REDIRECT_TO_LOGIN (login_path)
  3. path == login_path and credential    -> REDIRECT_TO_HOME  (home_path)
  4. otherwise                            -> CONTINUE

Only the presence of a credential is considered. An expired or forged token
passes here; the API layer that receives the request rejects it.

Prefix matching is on raw strings, so everything under /api/... and /auth/...
is public, and so is /apiary. The allow-list is a set -- no rule takes
priority over another.

Layer rule: no imports from api/ or web/. Only constants come from core/. No I/O.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from core.config import DEFAULT_PUBLIC_PATH_PREFIXES

DEFAULT_PUBLIC_PREFIXES: frozenset[str] = frozenset(DEFAULT_PUBLIC_PATH_PREFIXES)


class RoutingDecision(str, Enum):
    CONTINUE = "continue"
    REDIRECT_TO_LOGIN = "redirect_to_login"
    REDIRECT_TO_HOME = "redirect_to_home"


@dataclass(frozen=True)
class GateResult:
    """Outcome of one gate evaluation. target is None for CONTINUE."""

    decision: RoutingDecision
    target: Optional[str] = None

    @property
    def is_redirect(self) -> bool:
        return self.decision is not RoutingDecision.CONTINUE


@dataclass(frozen=True)
class PublicPathRules:
    """Set of path prefixes reachable without a session."""

    prefixes: frozenset[str] = DEFAULT_PUBLIC_PREFIXES

    @classmethod
    def from_prefixes(cls, prefixes: Iterable[str]) -> PublicPathRules:
        return cls(prefixes=frozenset(prefixes))

    def matches(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.prefixes)


_CONTINUE = GateResult(RoutingDecision.CONTINUE)


@dataclass(frozen=True)
class AuthGate:
    """Immutable gate configuration plus the decision function."""

    public_paths: PublicPathRules = field(default_factory=PublicPathRules)
    login_path: str = "/login"
    home_path: str = "/"

    def is_public(self, path: str) -> bool:
        return self.public_paths.matches(path)

    def evaluate(self, path: str, has_credential: bool) -> GateResult:
        if not has_credential and not self.is_public(path):
            return GateResult(RoutingDecision.REDIRECT_TO_LOGIN, self.login_path)
        if has_credential and path == self.login_path:
            return GateResult(RoutingDecision.REDIRECT_TO_HOME, self.home_path)
        return _CONTINUE


_default_gate = AuthGate()


def evaluate(path: str, has_credential: bool) -> GateResult:
    """Evaluate the default gate (built-in allow-list, /login and / targets)."""
    return _default_gate.evaluate(path, has_credential)
