"""Compromised list rule models.

A rule is one of two closed variants: ``NameOnlyRule`` flags every version of
a package, ``ExactVersionRule`` flags a single version string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .package_ref import format_display_name


@dataclass(frozen=True)
class NameOnlyRule:
    """Match any version of a package."""

    scope: str | None
    name: str

    @property
    def key(self) -> tuple[str | None, str]:
        return (self.scope, self.name)

    @property
    def display_name(self) -> str:
        return format_display_name(self.scope, self.name)

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class ExactVersionRule:
    """Match only one exact version string of a package."""

    scope: str | None
    name: str
    version: str

    def __post_init__(self) -> None:
        if not self.version:
            raise ValueError("Exact rules require a non-empty version")

    @property
    def key(self) -> tuple[str | None, str]:
        return (self.scope, self.name)

    @property
    def display_name(self) -> str:
        return format_display_name(self.scope, self.name)

    def __str__(self) -> str:
        return f"{self.display_name}@{self.version}"


Rule: TypeAlias = NameOnlyRule | ExactVersionRule
