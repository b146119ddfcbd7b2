"""Human-readable rendering of scan reports."""

from __future__ import annotations

from .models import MatchKind
from .report import ScanReport

_TEXT_LABELS = {
    MatchKind.EXACT: "[EXACT MATCH]",
    MatchKind.NAME_ONLY: "[NAME MATCH ]",
}


def render_text(report: ScanReport) -> str:
    """Return one line per match, or a single all-clear line."""
    if not report.has_matches:
        return "No compromised dependencies found.\n"

    lines = [f"{_TEXT_LABELS[m.kind]} {m.package}" for m in report.matches]
    return "\n".join(lines) + "\n"


def render_markdown(report: ScanReport) -> str:
    """Return a Markdown string with totals and a table of matched packages."""
    lines = []
    lines.append("# npm-compromised-scan Summary")
    lines.append("")
    lines.append(
        f"Packages scanned: {report.packages_scanned} | Matches: {len(report.matches)} "
        f"(exact: {report.exact_count}, name only: {report.name_only_count})"
    )
    lines.append("")
    lines.append("| Package | Installed | Match |")
    lines.append("| --- | --- | --- |")

    if not report.has_matches:
        lines.append("| No compromised packages | n/a | n/a |")

    for m in report.matches:
        kind = "exact" if m.kind is MatchKind.EXACT else "name only"
        lines.append(f"| {m.display_name} | {m.version or 'unknown'} | {kind} |")

    return "\n".join(lines) + "\n"
