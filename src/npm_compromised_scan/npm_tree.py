"""Obtain the ``npm ls --all --json`` dependency tree."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path
from typing import Any

from .errors import TreeSourceError

NPM_LS_COMMAND = ("npm", "ls", "--all", "--json")


def _decode(text: str, origin: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TreeSourceError(f"Failed to parse JSON from {origin}: {exc}") from exc
    except RecursionError as exc:
        raise TreeSourceError(f"JSON from {origin} is nested too deeply to decode") from exc
    if not isinstance(data, dict):
        raise TreeSourceError(f"Expected a JSON object from {origin}")
    return data


def run_npm_ls(cwd: Path | None = None) -> str:
    """Run ``npm ls --all --json`` and return its stdout.

    npm exits non-zero for problems such as missing peer dependencies while
    still printing a usable tree, so that only produces a warning.
    """
    try:
        proc = subprocess.run(
            NPM_LS_COMMAND,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise TreeSourceError(f"Failed to execute `{' '.join(NPM_LS_COMMAND)}`: {exc}") from exc

    if proc.returncode != 0:
        print(
            f"Warning: npm ls exited with non-zero status ({proc.returncode}). "
            "Still attempting to parse output.",
            file=sys.stderr,
        )
    return proc.stdout


def load_tree(
    npm_json: str | None = None,
    run_npm: bool = True,
    cwd: Path | None = None,
) -> dict[str, Any]:
    """Load the dependency tree from a file, stdin (``-``) or a fresh npm run."""
    if npm_json == "-":
        return _decode(sys.stdin.read(), "stdin (--npm-json -)")

    if npm_json:
        path = Path(npm_json)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TreeSourceError(f"Failed to read npm JSON file {path}: {exc}") from exc
        return _decode(text, str(path))

    if not run_npm:
        raise TreeSourceError("no-run-npm specified but no --npm-json source provided")

    return _decode(run_npm_ls(cwd), "`npm ls` output")
