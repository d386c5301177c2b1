"""Tests for Matcher anchored and locate modes."""

import pytest

from langue.errors import DefinitionError
from langue.matcher import Matcher
from langue.tokens import Token


class TestAnchored:
    """match_at must start exactly at the given offset."""

    def test_match_at_offset(self) -> None:
        m = Matcher.compile("keyword", "if")
        assert m.match_at("x if", 2) == Token("keyword", "if", 2)

    def test_no_match_elsewhere(self) -> None:
        m = Matcher.compile("keyword", "if")
        assert m.match_at("x if", 0) is None
        assert m.match_at("x if", 1) is None

    def test_empty_match_is_no_match(self) -> None:
        m = Matcher.compile("special", "a*")
        assert m.match_at("bbb", 0) is None

    def test_absorbs_whitespace_both_sides(self) -> None:
        m = Matcher.compile("punctuation", "{")
        token = m.match_at("if  {  x", 2, absorb_whitespace=True)
        assert token == Token("punctuation", "  {  ", 2)
        assert token.end == 7

    def test_whitespace_alone_is_no_match(self) -> None:
        m = Matcher.compile("special", "x?")
        assert m.match_at("   y", 0, absorb_whitespace=True) is None

    def test_without_absorption_whitespace_blocks(self) -> None:
        m = Matcher.compile("punctuation", "{")
        assert m.match_at("if {", 2) is None

    def test_multiline_anchors(self) -> None:
        m = Matcher.compile("comment", "^#.*$")
        assert m.match_at("a\n# c\nb", 2) == Token("comment", "# c", 2)

    def test_inline_global_flag_accepted(self) -> None:
        m = Matcher.compile("keyword", r"(?i)\bif\b")
        assert m.match_at("IF x", 0) == Token("keyword", "IF", 0)
        assert m.match_at("  If", 0, absorb_whitespace=True) == Token("keyword", "  If", 0)

    def test_backreference_with_absorption(self) -> None:
        m = Matcher.compile("string", r"(['\"]).*?\1")
        assert m.match_at("'ab' x", 0, absorb_whitespace=True) == Token("string", "'ab' ", 0)
        assert m.match_at(" \"a\" ", 0, absorb_whitespace=True).value == " \"a\" "

    def test_fragment_starting_with_whitespace(self) -> None:
        m = Matcher.compile("special", r"\n\w+")
        assert m.match_at("\n\nx", 1, absorb_whitespace=True) == Token("special", "\nx", 1)
        assert m.match_at("  \nx", 0, absorb_whitespace=True) is None


class TestLocate:
    """locate finds the nearest occurrence without consuming."""

    def test_nearest_occurrence(self) -> None:
        m = Matcher.compile("keyword", "if")
        assert m.locate("a if b if", 0) == 2
        assert m.locate("a if b if", 3) == 7

    def test_not_found(self) -> None:
        m = Matcher.compile("keyword", "if")
        assert m.locate("nothing here", 0) is None

    def test_skips_empty_occurrences(self) -> None:
        m = Matcher.compile("special", "a*")
        assert m.locate("bba", 0) == 2

    def test_line_start_respected_from_offset(self) -> None:
        """A ^ anchor does not match mid-line just because the search starts there."""
        m = Matcher.compile("comment", "^#")
        assert m.locate("a#\n#", 1) == 3


class TestCompile:
    def test_invalid_fragment_fails_fast(self) -> None:
        with pytest.raises(DefinitionError) as exc_info:
            Matcher.compile("keyword", "(unclosed")
        assert exc_info.value.fragment == "(unclosed"
        assert exc_info.value.category == "keyword"

    def test_equal_matchers(self) -> None:
        assert Matcher.compile("keyword", "if") == Matcher.compile("keyword", "if")
