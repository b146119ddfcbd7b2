"""Parsing of npm package identifiers.

Accepted forms are ``name``, ``name@version``, ``@scope/name`` and
``@scope/name@version``. The version is whatever follows the last ``@`` of the
part after the scope, so ``@scope/name@1.0.0@extra`` parses as name
``name@1.0.0`` and version ``extra``.
"""

from __future__ import annotations

from .errors import ParseError
from .models import ExactVersionRule, NameOnlyRule, PackageRef, Rule


def split_scope(text: str) -> tuple[str | None, str]:
    """Split ``@scope/rest`` into ``(scope, rest)``; unscoped text has scope None."""
    if not text.startswith("@"):
        return None, text

    slash = text.find("/")
    if slash == -1:
        raise ParseError(text, "scoped name is missing '/'")
    scope = text[1:slash]
    if not scope:
        raise ParseError(text, "empty scope")
    return scope, text[slash + 1 :]


def _check_version(text: str, version: str) -> None:
    if not version:
        raise ParseError(text, "empty version part")
    if "/" in version:
        raise ParseError(text, "version contains '/'")
    if not (version[0].isascii() and version[0].isalnum()):
        raise ParseError(text, "version does not start with a letter or digit")


def parse_identifier(text: str) -> tuple[str | None, str, str | None]:
    """Return ``(scope, name, version)`` for an identifier string.

    ``version`` is None when the identifier carries no version suffix.
    Raises ParseError for empty input, a scope without ``/`` or an empty name.
    """
    text = text.strip()
    if not text:
        raise ParseError(text, "empty identifier")

    scope, rest = split_scope(text)

    version: str | None = None
    at = rest.rfind("@")
    if at != -1:
        rest, version = rest[:at], rest[at + 1 :]
        _check_version(text, version)

    if not rest:
        raise ParseError(text, "empty name part")
    return scope, rest, version


def parse_package_name(text: str, version: str = "") -> PackageRef:
    """Build a PackageRef from a tree key such as ``@scope/name`` (no version suffix)."""
    scope, name = split_scope(text)
    if not name:
        raise ParseError(text, "empty name part")
    return PackageRef(scope=scope, name=name, version=version)


def parse_rule(text: str) -> Rule:
    scope, name, version = parse_identifier(text)
    if version is None:
        return NameOnlyRule(scope=scope, name=name)
    return ExactVersionRule(scope=scope, name=name, version=version)
