"""Depth-first traversal of an ``npm ls --all --json`` dependency tree."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import ConfigError, TreeShapeError, TreeTooDeep
from .identifiers import parse_package_name
from .models import PackageRef

DEFAULT_MAX_DEPTH = 256
# Each level is two nested JSON objects, so deeper trees cannot be decoded
# within the interpreter's recursion limit.
MAX_ALLOWED_DEPTH = 400


def _children(node: Mapping[str, Any], path: str) -> Mapping[str, Any]:
    deps = node.get("dependencies")
    if deps is None:
        return {}
    if not isinstance(deps, Mapping):
        raise TreeShapeError(f"'dependencies' of {path} must be an object")
    return deps


def _node_version(node: Mapping[str, Any]) -> str:
    version = node.get("version")
    return version if isinstance(version, str) else ""


def walk(root: Mapping[str, Any], max_depth: int = DEFAULT_MAX_DEPTH) -> list[PackageRef]:
    """Return every distinct package in the tree, in first-seen depth-first order.

    The root is the project itself and is never emitted. A package seen a
    second time is not emitted again but its children are still visited.
    Nodes without a usable ``version`` are reported with an empty version.
    """
    if not 1 <= max_depth <= MAX_ALLOWED_DEPTH:
        raise ConfigError(f"Max depth must be between 1 and {MAX_ALLOWED_DEPTH}, got {max_depth}")
    if not isinstance(root, Mapping):
        raise TreeShapeError("Dependency tree root must be an object")

    found: list[PackageRef] = []
    seen: set[tuple[str | None, str, str]] = set()

    def visit(node: Mapping[str, Any], path: str, depth: int) -> None:
        for child_name, child in _children(node, path).items():
            child_path = f"{path} > {child_name}"
            if not isinstance(child, Mapping):
                raise TreeShapeError(f"Dependency entry {child_path} must be an object")
            if depth >= max_depth:
                raise TreeTooDeep(max_depth)

            pkg = parse_package_name(child_name, _node_version(child))
            key = (pkg.scope, pkg.name, pkg.version)
            if key not in seen:
                seen.add(key)
                found.append(pkg)
            visit(child, child_path, depth + 1)

    visit(root, "<root>", 0)
    return found
