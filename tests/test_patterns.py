import pytest
from pydantic import TypeAdapter, ValidationError

from wildcard_intersection.patterns import (
    WILDCARD,
    PatternText,
    is_valid_pattern,
    literal_prefix,
    literal_suffix,
    matches,
)

# --- Test Cases for is_valid_pattern ---


@pytest.mark.parametrize(
    "text, expected",
    [
        pytest.param("", True, id="empty"),
        pytest.param("abc", True, id="literal"),
        pytest.param("*", True, id="wildcard_only"),
        pytest.param("a*c", True, id="single_wildcard"),
        pytest.param("**", False, id="two_wildcards"),
        pytest.param("a*b*c", False, id="separated_wildcards"),
        pytest.param("***", False, id="three_wildcards"),
    ],
)
def test_is_valid_pattern(text: str, expected: bool):
    """Test is_valid_pattern accepts zero or one wildcard only."""
    assert is_valid_pattern(text) is expected


# --- Test Cases for literal_prefix / literal_suffix ---


@pytest.mark.parametrize(
    "pattern, expected_prefix, expected_suffix",
    [
        pytest.param("", "", "", id="empty"),
        pytest.param("aa", "aa", "aa", id="literal"),
        pytest.param("a*", "a", "", id="trailing_wildcard"),
        pytest.param("*a", "", "a", id="leading_wildcard"),
        pytest.param("a*b", "a", "b", id="inner_wildcard"),
        pytest.param("*", "", "", id="wildcard_only"),
    ],
)
def test_literal_prefix_and_suffix(
    pattern: str, expected_prefix: str, expected_suffix: str
):
    """Test P(x) and S(x) around the wildcard, or the whole literal without one."""
    assert literal_prefix(pattern) == expected_prefix
    assert literal_suffix(pattern) == expected_suffix


# --- Test Cases for matches ---


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        pytest.param("", "", True, id="empty_matches_empty"),
        pytest.param("", "a", False, id="empty_rejects_nonempty"),
        pytest.param("abc", "abc", True, id="literal_exact"),
        pytest.param("abc", "abcd", False, id="literal_longer_text"),
        pytest.param("*", "", True, id="wildcard_matches_empty"),
        pytest.param("*", "anything", True, id="wildcard_matches_anything"),
        pytest.param("a*b", "ab", True, id="wildcard_matches_nothing"),
        pytest.param("a*b", "axxb", True, id="wildcard_matches_middle"),
        pytest.param("a*b", "axxc", False, id="wrong_suffix"),
        pytest.param("a*b", "cxxb", False, id="wrong_prefix"),
        pytest.param("ab*ba", "aba", False, id="prefix_and_suffix_cannot_overlap"),
        pytest.param("ab*ba", "abba", True, id="prefix_and_suffix_adjacent"),
    ],
)
def test_matches(pattern: str, text: str, expected: bool):
    """Test matches() against literal and wildcard patterns."""
    assert matches(pattern, text) is expected


# --- Test Cases for PatternText ---


@pytest.mark.parametrize("text", ["", "a", "*", "a*", "*a", "a*b"])
def test_pattern_text_valid(text: str):
    """Test PatternText accepts text with at most one wildcard."""
    assert TypeAdapter(PatternText).validate_python(text) == text


@pytest.mark.parametrize("text", ["**", "a*b*", "*a*"])
def test_pattern_text_invalid(text: str):
    """Test PatternText rejects text with multiple wildcards."""
    with pytest.raises(ValidationError):
        TypeAdapter(PatternText).validate_python(text)


def test_wildcard_character():
    """Test the wildcard is the asterisk."""
    assert WILDCARD == "*"
