"""Tests for envlogger.filters — regex and substring content filters."""

import re

import pytest

from envlogger.filters import RegexFilter, SubstringFilter, make_filter


class TestRegexFilter:
    """RegexFilter uses unanchored re.search semantics."""

    def test_matches_substring_anywhere(self):
        """Pattern may match in the middle of the message."""
        assert RegexFilter("b.d").is_match("abcde")

    def test_no_match(self):
        """Non-matching text is rejected."""
        assert not RegexFilter("^xyz").is_match("abcxyz")

    def test_star_pattern(self):
        """'a*c' matches any text containing 'c'."""
        f = RegexFilter("a*c")
        assert f.is_match("aaac")
        assert f.is_match("c")
        assert not f.is_match("aaa")

    def test_pattern_and_str(self):
        """pattern and str() return the original text."""
        f = RegexFilter("[0-9] scopes")
        assert f.pattern == "[0-9] scopes"
        assert str(f) == "[0-9] scopes"

    def test_bad_pattern_raises(self):
        """An uncompilable pattern raises re.error."""
        with pytest.raises(re.error):
            RegexFilter("a(b")


class TestSubstringFilter:
    """SubstringFilter is a literal containment test."""

    def test_literal_match(self):
        """Regex metacharacters are matched literally."""
        f = SubstringFilter("a*c")
        assert f.is_match("xa*cx")
        assert not f.is_match("aaac")

    def test_pattern_and_str(self):
        """pattern and str() return the original text."""
        f = SubstringFilter("abc")
        assert f.pattern == "abc"
        assert str(f) == "abc"

    def test_accepts_regex_syntax_errors(self):
        """Patterns that are not valid regexes still build."""
        assert SubstringFilter("a(b").is_match("xa(b")


class TestMakeFilter:
    """Test make_filter() strategy selection."""

    def test_default_is_regex(self):
        """Without a strategy a RegexFilter is built."""
        assert isinstance(make_filter("abc"), RegexFilter)

    def test_substring(self):
        """'substring' builds a SubstringFilter."""
        assert isinstance(make_filter("abc", "substring"), SubstringFilter)

    def test_unknown_strategy(self):
        """Unknown strategy names raise ValueError."""
        with pytest.raises(ValueError, match="unknown filter strategy"):
            make_filter("abc", "glob")
