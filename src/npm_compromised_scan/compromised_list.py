"""Read compromised package lists from a file or stdin."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

from .errors import ListSourceError
from .rules import RuleSet


def iter_entries(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, entry)`` for each non-blank, non-comment line."""
    for index, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        yield index, line


def read_list_text(source: str | Path) -> str:
    if str(source) == "-":
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ListSourceError(f"Compromised list file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ListSourceError(f"Unable to read compromised list file {path}: {exc}") from exc


def load_rule_set(source: str | Path) -> RuleSet:
    """Parse the list at ``source`` (a path, or ``-`` for stdin) into a RuleSet."""
    return RuleSet.from_entries(iter_entries(read_list_text(source)))
