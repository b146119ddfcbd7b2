"""Match result model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .package_ref import PackageRef


class MatchKind(Enum):
    """How a package matched the compromised list."""

    EXACT = "exact"
    NAME_ONLY = "name"


@dataclass(frozen=True)
class MatchResult:
    """One compromised package found in the dependency tree."""

    package: PackageRef
    kind: MatchKind

    @property
    def display_name(self) -> str:
        return self.package.display_name

    @property
    def version(self) -> str:
        return self.package.version

    def sort_key(self) -> tuple[str, str]:
        return (self.display_name, self.version)

    def to_dict(self) -> dict[str, str]:
        return {
            "matchType": self.kind.value,
            "name": self.display_name,
            "version": self.version,
        }
