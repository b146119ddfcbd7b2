"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .models import MatchKind, MatchResult, PackageRef
from .rules import RuleSet

REPORT_FORMAT_VERSION = "1"


@dataclass(frozen=True)
class ScanReport:
    """Ordered findings of a scan, sorted by display name then version."""

    matches: tuple[MatchResult, ...]
    packages_scanned: int
    compromised_names: tuple[str, ...] = ()
    compromised_exact: tuple[str, ...] = ()

    @property
    def exact_count(self) -> int:
        return sum(1 for m in self.matches if m.kind is MatchKind.EXACT)

    @property
    def name_only_count(self) -> int:
        return sum(1 for m in self.matches if m.kind is MatchKind.NAME_ONLY)

    @property
    def has_matches(self) -> bool:
        return bool(self.matches)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": REPORT_FORMAT_VERSION,
            "hasMatches": self.has_matches,
            "matches": [m.to_dict() for m in self.matches],
            "totals": {
                "matches": len(self.matches),
                "exact": self.exact_count,
                "nameOnly": self.name_only_count,
                "packagesScanned": self.packages_scanned,
            },
            "compromisedNames": list(self.compromised_names),
            "compromisedExact": list(self.compromised_exact),
        }


def build_report(
    matches: Iterable[tuple[PackageRef, MatchKind | None]],
    rules: RuleSet | None = None,
    packages_scanned: int | None = None,
) -> ScanReport:
    """Aggregate matcher output into a deterministically ordered report.

    Pairs whose kind is None (no match) are dropped. When ``packages_scanned``
    is omitted it is the number of pairs seen.
    """
    seen = 0
    results: list[MatchResult] = []
    for pkg, kind in matches:
        seen += 1
        if kind is not None:
            results.append(MatchResult(package=pkg, kind=kind))

    results.sort(key=MatchResult.sort_key)

    names: tuple[str, ...] = ()
    exact: tuple[str, ...] = ()
    if rules is not None:
        names = tuple(sorted(str(rule) for rule in rules.name_only_rules()))
        exact = tuple(sorted(str(rule) for rule in rules.exact_rules()))

    return ScanReport(
        matches=tuple(results),
        packages_scanned=seen if packages_scanned is None else packages_scanned,
        compromised_names=names,
        compromised_exact=exact,
    )
