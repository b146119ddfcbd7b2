"""Resolved package reference model."""

from __future__ import annotations

from dataclasses import dataclass


def format_display_name(scope: str | None, name: str) -> str:
    return f"@{scope}/{name}" if scope else name


@dataclass(frozen=True)
class PackageRef:
    """A single resolved dependency as reported by the tree."""

    scope: str | None
    name: str
    version: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")
        if self.scope == "":
            raise ValueError("Package scope must be None or non-empty")

    @property
    def key(self) -> tuple[str | None, str]:
        return (self.scope, self.name)

    @property
    def display_name(self) -> str:
        return format_display_name(self.scope, self.name)

    def __str__(self) -> str:
        if self.version:
            return f"{self.display_name}@{self.version}"
        return self.display_name
