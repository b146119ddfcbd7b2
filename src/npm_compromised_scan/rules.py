"""Compromised list rule set."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import ParseError, RuleParseError
from .identifiers import parse_rule
from .models import ExactVersionRule, NameOnlyRule, Rule
from .models.package_ref import format_display_name

RuleKey = tuple[str | None, str]


@dataclass(frozen=True)
class RuleSet:
    """Immutable collection of rules grouped by ``(scope, name)``.

    Duplicate entries collapse to a single rule; a package may still carry a
    name-only rule alongside any number of exact-version rules.
    """

    _rules: Mapping[RuleKey, frozenset[Rule]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __len__(self) -> int:
        return sum(len(rules) for rules in self._rules.values())

    def __bool__(self) -> bool:
        return bool(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        for key in sorted(self._rules, key=_sortable):
            yield from sorted(self._rules[key], key=str)

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def rules_for(self, scope: str | None, name: str) -> frozenset[Rule]:
        return self._rules.get((scope, name), frozenset())

    def name_only_rules(self) -> list[NameOnlyRule]:
        return [rule for rule in self if isinstance(rule, NameOnlyRule)]

    def exact_rules(self) -> list[ExactVersionRule]:
        return [rule for rule in self if isinstance(rule, ExactVersionRule)]

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[int, str]]) -> RuleSet:
        """Build from ``(line_number, entry)`` pairs, failing on the first bad entry."""
        grouped: dict[RuleKey, set[Rule]] = defaultdict(set)
        for line_number, text in entries:
            try:
                rule = parse_rule(text)
            except ParseError as exc:
                raise RuleParseError(line_number, text.strip(), exc.reason) from exc
            grouped[rule.key].add(rule)

        frozen = {key: frozenset(rules) for key, rules in grouped.items()}
        return cls(MappingProxyType(frozen))


def _sortable(key: RuleKey) -> str:
    return format_display_name(*key)


def build_rule_set(lines: Iterable[str]) -> RuleSet:
    """Build a RuleSet from comment-free entry lines, numbered from 1."""
    return RuleSet.from_entries(enumerate(lines, start=1))
