"""Core scanning entrypoints.

This module MUST NOT depend on argument parsing or output rendering so it can
be reused by the CLI and by other wrappers.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .compromised_list import load_rule_set
from .matcher import match_package
from .npm_tree import load_tree
from .report import ScanReport, build_report
from .rules import RuleSet
from .walker import DEFAULT_MAX_DEPTH, walk


def scan_tree(
    tree: Mapping[str, Any],
    rules: RuleSet,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ScanReport:
    """Walk ``tree`` and report every package matching ``rules``."""
    packages = walk(tree, max_depth=max_depth)
    return build_report(
        ((pkg, match_package(pkg, rules)) for pkg in packages),
        rules=rules,
        packages_scanned=len(packages),
    )


def scan(
    list_source: str | Path,
    npm_json: str | None = None,
    run_npm: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
    cwd: Path | None = None,
) -> ScanReport:
    """Load the compromised list and dependency tree, then scan.

    The list is parsed first so a malformed list fails before npm is run.
    """
    rules = load_rule_set(list_source)
    tree = load_tree(npm_json=npm_json, run_npm=run_npm, cwd=cwd)
    return scan_tree(tree, rules, max_depth=max_depth)
