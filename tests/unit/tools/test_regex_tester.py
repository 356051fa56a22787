"""Tests for regex testing and replacement."""

import pytest

from toolbox.tools import regex_tester


class TestMatch:
    """Tests for regex_tester.test_regex."""

    def test_first_match_only_without_global(self) -> None:
        report = regex_tester.test_regex(r"(\d+)-(\d+)", "10-20 and 30-40")
        assert report.error is None
        assert len(report.matches) == 1
        match = report.matches[0]
        assert match.full_match == "10-20"
        assert (match.start, match.end) == (0, 5)
        assert match.groups == ["10", "20"]

    def test_global_finds_all(self) -> None:
        report = regex_tester.test_regex(r"\d+", "a1 b22 c333", "g")
        assert [m.full_match for m in report.matches] == ["1", "22", "333"]

    def test_unmatched_groups_are_skipped(self) -> None:
        report = regex_tester.test_regex(r"(a)|(b)", "b")
        assert report.matches[0].groups == ["b"]

    def test_no_match(self) -> None:
        assert regex_tester.test_regex("z", "abc", "g").matches == []

    @pytest.mark.parametrize(
        ("pattern", "text", "flags"),
        [
            ("abc", "ABC", "i"),
            ("^b$", "a\nb", "m"),
            ("a.b", "a\nb", "s"),
            ("a b c", "abc", "x"),
        ],
    )
    def test_flags(self, pattern: str, text: str, flags: str) -> None:
        assert regex_tester.test_regex(pattern, text, flags).matches
        assert not regex_tester.test_regex(pattern, text, "").matches

    def test_unknown_flags_ignored(self) -> None:
        assert regex_tester.test_regex("a", "a", "uyq").matches

    def test_invalid_pattern_reported(self) -> None:
        report = regex_tester.test_regex("(unclosed", "text")
        assert report.matches == []
        assert (report.error or "").startswith("Invalid regex pattern:")


class TestReplace:
    """Tests for regex_tester.replace_regex."""

    def test_replaces_first_only_without_global(self) -> None:
        report = regex_tester.replace_regex("o", "foo boo", "0")
        assert report.result == "f0o boo"
        assert report.count == 1

    def test_global_replaces_all(self) -> None:
        report = regex_tester.replace_regex("o", "foo boo", "0", "g")
        assert report.result == "f00 b00"
        assert report.count == 4

    def test_numbered_and_named_references(self) -> None:
        report = regex_tester.replace_regex(
            r"(?P<first>\w+) (\w+)", "hello world", "${2} $first", "g"
        )
        assert report.result == "world hello"

    def test_dollar_escape_and_missing_group(self) -> None:
        report = regex_tester.replace_regex(r"(\d+)", "cost 5", "$$$1$9", "g")
        assert report.result == "cost $5"

    def test_non_ascii_name_is_literal(self) -> None:
        report = regex_tester.replace_regex("(a)", "a", "$\u00e9|${\u00e9}", "")
        assert report.result == "$\u00e9|${\u00e9}"

    def test_backslashes_are_literal(self) -> None:
        report = regex_tester.replace_regex("x", "x", r"\n\1")
        assert report.result == r"\n\1"

    def test_no_match_counts_zero(self) -> None:
        report = regex_tester.replace_regex("z", "abc", "y", "g")
        assert (report.result, report.count) == ("abc", 0)

    def test_invalid_pattern_reported(self) -> None:
        report = regex_tester.replace_regex("[", "abc", "y")
        assert report.result == ""
        assert report.error is not None
