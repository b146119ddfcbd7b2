"""Match resolved packages against a rule set."""

from __future__ import annotations

from .models import ExactVersionRule, MatchKind, NameOnlyRule, PackageRef
from .rules import RuleSet


def match_package(pkg: PackageRef, rules: RuleSet) -> MatchKind | None:
    """Return how ``pkg`` matches ``rules``, or None when it does not.

    An exact-version rule wins over a name-only rule for the same package.
    Versions compare as plain strings.
    """
    candidates = rules.rules_for(pkg.scope, pkg.name)
    if not candidates:
        return None

    name_only = False
    for rule in candidates:
        if isinstance(rule, ExactVersionRule):
            if rule.version == pkg.version:
                return MatchKind.EXACT
        elif isinstance(rule, NameOnlyRule):
            name_only = True
    return MatchKind.NAME_ONLY if name_only else None
