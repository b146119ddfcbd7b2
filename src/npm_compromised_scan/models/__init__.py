"""Data models for the compromised package scanner."""

from __future__ import annotations

from .match_result import MatchKind, MatchResult
from .package_ref import PackageRef
from .rule import ExactVersionRule, NameOnlyRule, Rule

__all__ = [
    "ExactVersionRule",
    "MatchKind",
    "MatchResult",
    "NameOnlyRule",
    "PackageRef",
    "Rule",
]
