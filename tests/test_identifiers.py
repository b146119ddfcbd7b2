"""Tests for package identifier parsing."""

import pytest

from npm_compromised_scan.errors import ParseError
from npm_compromised_scan.identifiers import (
    parse_identifier,
    parse_package_name,
    parse_rule,
    split_scope,
)
from npm_compromised_scan.models import ExactVersionRule, NameOnlyRule


class TestParseIdentifier:
    """Test the four accepted identifier forms."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("left-pad", (None, "left-pad", None)),
            ("left-pad@1.3.0", (None, "left-pad", "1.3.0")),
            ("@bad/evil-lib", ("bad", "evil-lib", None)),
            ("@bad/evil-lib@1.0.0", ("bad", "evil-lib", "1.0.0")),
            ("  event-stream@3.3.6  ", (None, "event-stream", "3.3.6")),
            ("pkg@1.0.0-beta.1", (None, "pkg", "1.0.0-beta.1")),
        ],
    )
    def test_valid_forms(self, text, expected):
        assert parse_identifier(text) == expected

    def test_multiple_at_after_scope_splits_on_last(self):
        """Only the last '@' separates the version."""
        assert parse_identifier("@scope/name@1.0.0@extra") == ("scope", "name@1.0.0", "extra")

    def test_unscoped_multiple_at_splits_on_last(self):
        assert parse_identifier("a@b@c") == (None, "a@b", "c")

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "@incomplete",
            "@/name",
            "@scope/",
            "@scope/@1.0.0",
            "left-pad@",
            "left-pad@^1.0.0",
            "left-pad@1.0/2",
        ],
    )
    def test_invalid_forms(self, text):
        with pytest.raises(ParseError):
            parse_identifier(text)

    def test_error_carries_text(self):
        with pytest.raises(ParseError) as excinfo:
            parse_identifier("@incomplete")
        assert excinfo.value.text == "@incomplete"
        assert "@incomplete" in str(excinfo.value)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_identifier("")

    @pytest.mark.parametrize(
        "text",
        ["event-stream", "left-pad@1.3.0", "@bad/evil-lib", "@bad/evil-lib@1.0.0"],
    )
    def test_rule_round_trips_to_display_string(self, text):
        assert str(parse_rule(f" {text}\t")) == text


class TestParseRule:
    """Test rule variant selection."""

    def test_name_only(self):
        assert parse_rule("@bad/evil-lib") == NameOnlyRule(scope="bad", name="evil-lib")

    def test_exact(self):
        assert parse_rule("left-pad@1.3.0") == ExactVersionRule(
            scope=None, name="left-pad", version="1.3.0"
        )


class TestPackageName:
    """Test splitting of dependency tree keys."""

    def test_split_scope(self):
        assert split_scope("@types/node") == ("types", "node")
        assert split_scope("lodash") == (None, "lodash")

    def test_parse_package_name_keeps_version(self):
        pkg = parse_package_name("@types/node", "20.1.0")
        assert pkg.scope == "types"
        assert pkg.name == "node"
        assert pkg.version == "20.1.0"
        assert pkg.display_name == "@types/node"
        assert str(pkg) == "@types/node@20.1.0"

    @pytest.mark.parametrize("key", ["", "@types", "@types/"])
    def test_invalid_keys(self, key):
        with pytest.raises(ParseError):
            parse_package_name(key)
