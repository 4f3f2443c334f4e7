#!/usr/bin/env python3
"""
Net Worth -- authorization gate inspector.

Shows what the edge gate will do with a request path, using the same settings
the running service loads (environment variables and .env). Handy when editing
PUBLIC_PATH_PREFIXES or GATE_MATCHER.

Usage:
  python main.py /assets
  python main.py /login --credential
  python main.py /assets /api/v1/health /_next/static/app.js --json
  python main.py --file paths.txt
"""

import argparse
import json
from pathlib import Path
from typing import Optional

from auth.gate import GateResult
from auth.middleware import AuthGateMiddleware
from core.config import get_settings


def _load_file(path: str) -> list[str]:
    """Read request paths from a file -- one per line, # comments and blank lines ignored."""
    file_path = Path(path).resolve()
    if not file_path.is_file():
        print(f"  [!] '{path}' is not a readable file.")
        return []
    try:
        lines = file_path.read_text().splitlines()
    except OSError as e:
        print(f"  [!] Could not read file '{path}': {e}")
        return []
    return [line.strip() for line in lines if line.strip() and not line.strip().startswith("#")]


def inspect_paths(paths: list[str], has_credential: bool) -> list[dict]:
    """Run each path through the configured matcher and gate.

    A path the matcher does not intercept gets decision "not_intercepted" --
    the gate never sees it.
    """
    options = AuthGateMiddleware.options_from_settings(get_settings())
    gate, matcher = options["gate"], options["matcher"]

    rows: list[dict] = []
    for path in paths:
        if not matcher.should_intercept(path):
            rows.append({"path": path, "decision": "not_intercepted", "target": None})
            continue
        result: GateResult = gate.evaluate(path, has_credential)
        rows.append({"path": path, "decision": result.decision.value, "target": result.target})
    return rows


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="networth-gate",
        description="Show the authorization gate decision for request paths.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py /assets
  python main.py /login --credential
  PUBLIC_PATH_PREFIXES='["/login","/api"]' python main.py /register
        """,
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="One or more request paths")
    parser.add_argument(
        "--file",
        metavar="FILE",
        help="Path to a text file with one request path per line (# comments supported)",
    )
    parser.add_argument(
        "--credential",
        action="store_true",
        help="Evaluate as if the session cookie were present",
    )
    parser.add_argument("--json", action="store_true", help="Output structured JSON")
    args = parser.parse_args(argv)

    paths: list[str] = list(args.paths)
    if args.file:
        paths.extend(_load_file(args.file))

    if not paths:
        parser.print_help()
        return

    rows = inspect_paths(paths, args.credential)

    if args.json:
        print(json.dumps(rows, indent=2))
        return

    width = max(len(row["path"]) for row in rows)
    for row in rows:
        target = f" -> {row['target']}" if row["target"] else ""
        print(f"  {row['path']:<{width}}  {row['decision']}{target}")


if __name__ == "__main__":
    main()
