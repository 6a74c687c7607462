from __future__ import annotations

from typing import Annotated

from pydantic import StringConstraints

WILDCARD = "*"

PatternText = Annotated[str, StringConstraints(pattern=r"^[^*]*\*?[^*]*$")]


def is_valid_pattern(text: str) -> bool:
    """Whether `text` holds at most one wildcard."""
    count = 0
    for c in text:
        if c == WILDCARD:
            count += 1
            if count > 1:
                return False
    return True


def literal_prefix(pattern: str) -> str:
    """P(x): everything before the wildcard, or all of `pattern` without one.

    >>> literal_prefix("ab*c")
    'ab'
    >>> literal_prefix("abc")
    'abc'
    """
    return pattern.partition(WILDCARD)[0]


def literal_suffix(pattern: str) -> str:
    """S(x): everything after the wildcard, or all of `pattern` without one.

    >>> literal_suffix("ab*c")
    'c'
    >>> literal_suffix("abc")
    'abc'
    """
    head, sep, tail = pattern.partition(WILDCARD)
    return tail if sep else head


def matches(pattern: str, text: str) -> bool:
    if WILDCARD not in pattern:
        return pattern == text

    prefix, suffix = literal_prefix(pattern), literal_suffix(pattern)
    return (
        len(text) >= len(prefix) + len(suffix)
        and text.startswith(prefix)
        and text.endswith(suffix)
    )
