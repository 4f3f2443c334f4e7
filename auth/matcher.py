"""
auth/matcher.py -- Interception pre-filter for the authorization gate.

Runs before the gate. Paths the matcher rejects (static bundles under
/_next/static, optimized images under /_next/image, /favicon.ico) are never
shown to the gate at all -- the middleware forwards them untouched. This keeps
AuthGate.evaluate() a pure function of (path, credential) with no knowledge of
asset routing.

The expression is matched against the whole path (re.fullmatch), the same way
the edge router treats its matcher patterns. DOTALL is set so a decoded
newline in the path cannot make a protected path fall outside the matcher.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from core.config import DEFAULT_GATE_MATCHER


@dataclass(frozen=True)
class RouteMatcher:
    pattern: re.Pattern[str] = field(default_factory=lambda: re.compile(DEFAULT_GATE_MATCHER, re.DOTALL))

    @classmethod
    def from_expression(cls, expression: str) -> RouteMatcher:
        return cls(pattern=re.compile(expression, re.DOTALL))

    def should_intercept(self, path: str) -> bool:
        return self.pattern.fullmatch(path) is not None
