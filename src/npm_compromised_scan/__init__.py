"""npm-compromised-scan core package.

Scans an ``npm ls --all --json`` dependency tree for packages named in a list
of known-compromised package identifiers.
"""

from .core import scan, scan_tree
from .errors import ParseError, RuleParseError, ScanError, TreeTooDeep
from .models import MatchKind, MatchResult, PackageRef
from .report import ScanReport, build_report
from .rules import RuleSet, build_rule_set
from .walker import walk

__all__ = [
    "MatchKind",
    "MatchResult",
    "PackageRef",
    "ParseError",
    "RuleParseError",
    "RuleSet",
    "ScanError",
    "ScanReport",
    "TreeTooDeep",
    "build_report",
    "build_rule_set",
    "scan",
    "scan_tree",
    "walk",
]
