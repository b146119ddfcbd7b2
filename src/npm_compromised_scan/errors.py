"""Error types raised by the scanning core.

Every failure of the tool itself derives from ``ScanError`` so callers can
tell "the scan failed" apart from "the scan found compromised packages".
"""

from __future__ import annotations


class ScanError(RuntimeError):
    """Base error for failures that abort a scan."""


class ParseError(ScanError, ValueError):
    """Raised when a package identifier or list entry is malformed."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid package identifier '{text}' ({reason})")


class RuleParseError(ParseError):
    """Raised when a compromised list entry cannot be parsed."""

    def __init__(self, line_number: int, text: str, reason: str) -> None:
        super().__init__(text, reason)
        self.line_number = line_number
        self.args = (f"Invalid entry at line {line_number}: '{text}' ({reason})",)


class TreeTooDeep(ScanError):
    """Raised when the dependency tree nests deeper than the allowed limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Dependency tree exceeds maximum depth of {limit}")


class TreeShapeError(ScanError):
    """Raised when the dependency tree JSON does not have the expected shape."""


class TreeSourceError(ScanError):
    """Raised when the dependency tree cannot be obtained or decoded."""


class ListSourceError(ScanError):
    """Raised when the compromised list cannot be read."""


class ConfigError(ScanError):
    """Raised when configuration values are invalid."""


class ReportSchemaError(ScanError, ValueError):
    """Raised when a structured report does not conform to the report schema."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__("Report failed schema validation:\n" + "\n".join(violations))
