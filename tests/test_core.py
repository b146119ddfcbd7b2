"""End-to-end tests of the scanning core."""

import json
import random

import pytest

from conftest import node, tree
from npm_compromised_scan.core import scan, scan_tree
from npm_compromised_scan.errors import ParseError, TreeSourceError
from npm_compromised_scan.models import MatchKind
from npm_compromised_scan.rules import build_rule_set


def _summary(report):
    return [(m.kind, m.display_name, m.version) for m in report.matches]


def _shuffled(data, rng):
    """Return a copy of ``data`` with every dependencies map in a random order."""
    result = {k: v for k, v in data.items() if k != "dependencies"}
    deps = data.get("dependencies")
    if deps:
        items = list(deps.items())
        rng.shuffle(items)
        result["dependencies"] = {name: _shuffled(child, rng) for name, child in items}
    return result


class TestScenarios:
    """Scenarios for the full walk, match and report pipeline."""

    def test_exact_and_name_only(self, sample_tree):
        rules = build_rule_set(["event-stream", "left-pad@1.3.0"])

        report = scan_tree(sample_tree, rules)

        assert _summary(report) == [
            (MatchKind.NAME_ONLY, "event-stream", "3.3.6"),
            (MatchKind.EXACT, "left-pad", "1.3.0"),
        ]
        assert report.exact_count == 1
        assert report.name_only_count == 1
        assert report.packages_scanned == 7

    def test_scoped_package_under_two_parents(self):
        evil = {"@bad/evil-lib": node("1.0.0")}
        data = tree(
            {
                "a": node("1.0.0", b=node("1.0.0", **evil)),
                "x": node("1.0.0", y=node("1.0.0", **evil)),
            }
        )

        report = scan_tree(data, build_rule_set(["@bad/evil-lib"]))

        assert _summary(report) == [(MatchKind.NAME_ONLY, "@bad/evil-lib", "1.0.0")]

    def test_empty_rule_list(self, sample_tree):
        report = scan_tree(sample_tree, build_rule_set([]))
        assert report.matches == ()
        assert not report.has_matches

    def test_malformed_rule(self):
        with pytest.raises(ParseError):
            build_rule_set(["@incomplete"])

    def test_output_independent_of_child_order(self, sample_tree):
        rules = build_rule_set(["event-stream", "left-pad", "debug@2.6.9", "flatmap-stream"])
        expected = scan_tree(sample_tree, rules)

        rng = random.Random(1234)
        for _ in range(10):
            assert scan_tree(_shuffled(sample_tree, rng), rules) == expected


class TestScan:
    """Test loading inputs from files."""

    def test_scan_from_files(self, tmp_path, sample_tree):
        list_file = tmp_path / "compromised.txt"
        list_file.write_text("# known bad\n\nevent-stream\nleft-pad@1.3.0\n", encoding="utf-8")
        tree_file = tmp_path / "tree.json"
        tree_file.write_text(json.dumps(sample_tree), encoding="utf-8")

        report = scan(list_file, npm_json=str(tree_file), run_npm=False)

        assert [str(m.package) for m in report.matches] == ["event-stream@3.3.6", "left-pad@1.3.0"]

    def test_list_is_parsed_before_tree(self, tmp_path, monkeypatch):
        list_file = tmp_path / "compromised.txt"
        list_file.write_text("ok\n@incomplete\n", encoding="utf-8")

        def boom(*args, **kwargs):
            raise AssertionError("tree must not be loaded")

        monkeypatch.setattr("npm_compromised_scan.core.load_tree", boom)
        with pytest.raises(ParseError):
            scan(list_file)

    def test_no_source_without_npm(self, tmp_path):
        list_file = tmp_path / "compromised.txt"
        list_file.write_text("left-pad\n", encoding="utf-8")
        with pytest.raises(TreeSourceError):
            scan(list_file, run_npm=False)
