import regex
import pytest
from livegrep.matcher import find_matches, iter_lines
from livegrep.models import Query
from livegrep.query import INVALID_PATTERN, InvalidPattern, compile_matcher, compile_query


def test_compile_valid_pattern():
    m = compile_query(r"wo\w", False)
    assert isinstance(m, regex.Pattern)
    assert m.search("hello world")


def test_compile_case_insensitive():
    m = compile_query("WORLD", True)
    assert m.search("hello world")
    assert not compile_query("WORLD", False).search("hello world")


def test_compile_invalid_pattern_returns_marker():
    m = compile_query("(", False)
    assert m is INVALID_PATTERN
    assert isinstance(m, InvalidPattern)
    assert not m


def test_compile_matcher_from_query_snapshot():
    assert compile_matcher(Query("(", True)) is INVALID_PATTERN
    assert compile_matcher(Query("x", True)).flags & regex.IGNORECASE


def test_find_matches_is_non_overlapping_leftmost_first():
    assert find_matches("aaaa", regex.compile("aa")) == [(0, 2), (2, 4)]
    assert find_matches("aaa", regex.compile("aa")) == [(0, 2)]
    assert find_matches("abcabc", regex.compile("b|bc")) == [(1, 2), (4, 5)]


def test_find_matches_no_hit():
    assert find_matches("nothing here", regex.compile("wor")) == []


@pytest.mark.parametrize("text,expected", [
    ("", []),
    ("one", ["one"]),
    ("one\n", ["one"]),
    ("one\ntwo", ["one", "two"]),
    ("one\r\ntwo\r\n", ["one", "two"]),
    ("a\n\nb\n", ["a", "", "b"]),
    ("\n", [""]),
])
def test_iter_lines(text, expected):
    assert list(iter_lines(text)) == expected
