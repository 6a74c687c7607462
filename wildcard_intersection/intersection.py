"""Intersection of single-wildcard patterns.

A pattern is written in fragment form below, e.g. ``abb*bba = [abb, *, bba]``.
P(x) and S(x) are the literal text before and after the wildcard of ``x``
(see :mod:`wildcard_intersection.patterns`).

The result of an intersection is either a pattern or ``None``. ``None`` means
no string is matched by both inputs; ``""`` is the pattern matching only the
empty string.

Patterns are validated lazily: a second wildcard is only reported when it sits
in a region the scan actually inspects. Pass ``strict=True`` to validate both
arguments up front instead.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from logzero import logger

from wildcard_intersection.errors import Argument, InvalidPatternError
from wildcard_intersection.patterns import WILDCARD, is_valid_pattern


def intersect_patterns(x: str, y: str, *, strict: bool = False) -> Optional[str]:
    """Return the pattern matched by both `x` and `y`, or None if there is none.

    Raises InvalidPatternError when a pattern is found to hold more than one
    wildcard.
    """
    if strict:
        arguments: tuple[tuple[Argument, str], ...] = (("x", x), ("y", y))
        for argument, pattern in arguments:
            if not is_valid_pattern(pattern):
                raise InvalidPatternError(argument, pattern)

    # x[:i] == y[:i] and neither holds a wildcard in that range.
    i = 0
    while True:
        if i == len(x) or i == len(y):
            if len(x) == len(y):
                return x

            # y == x + "*"
            if i + 1 == len(y) and y[i] == WILDCARD:
                return x

            # x == y + "*"
            if i + 1 == len(x) and x[i] == WILDCARD:
                return y

            # the longer one has a literal tail the shorter can't produce
            return None

        if x[i] == WILDCARD and y[i] == WILDCARD:
            # Only x's tail would be scanned past here, so check both tails
            # to report a second wildcard whatever the argument order.
            if not is_valid_pattern(x[i + 1 :]):
                raise InvalidPatternError("x", x)
            if not is_valid_pattern(y[i + 1 :]):
                raise InvalidPatternError("y", y)

        if x[i] == WILDCARD:
            return _intersect_suffixes(x, y, i, names=("x", "y"))

        if y[i] == WILDCARD:
            return _intersect_suffixes(y, x, i, names=("y", "x"))

        if x[i] != y[i]:
            return None

        i += 1


def _intersect_suffixes(
    x: str, y: str, i_wild: int, names: tuple[Argument, Argument]
) -> Optional[str]:
    # Requires x[i_wild] == "*" and x[:i_wild] == y[:i_wild]. `names` maps the
    # local x and y back to the caller's arguments.
    x_name, y_name = names
    i_x = len(x) - 1
    i_y = len(y) - 1

    # x[i_x + 1:] == y[i_y + 1:], with no wildcard in that range.
    while True:
        if i_x == i_wild:
            # The wildcard of x covers all of y[i_wild:i_y + 1], so y is the
            # narrower pattern. That region has not been looked at yet.
            if is_valid_pattern(y[i_wild : i_y + 1]):
                return y
            raise InvalidPatternError(y_name, y)

        if x[i_x] == WILDCARD:
            raise InvalidPatternError(x_name, x)

        if i_y == i_wild - 1:
            # y is literal and used up; x still needs x[i_wild + 1:i_x + 1].
            return None

        if y[i_y] == WILDCARD:
            # x = [P, *, q, S]
            # y = [P, r, *, S]
            return _intersect_wildcard_segments(
                prefix=x[:i_wild],
                suffix=y[i_y + 1 :],
                q=x[i_wild + 1 : i_x + 1],
                r_star=y[i_wild : i_y + 1],
            )

        if x[i_x] != y[i_y]:
            return None

        i_x -= 1
        i_y -= 1


def _intersect_wildcard_segments(prefix: str, suffix: str, q: str, r_star: str) -> str:
    """Join ``[prefix, *, q, suffix]`` and ``[prefix, r, *, suffix]``.

    The intersection of ``*q`` and ``r*`` is ``[r, *, t]``, where ``t`` is what
    is left of ``q`` after dropping its longest prefix that is also a suffix of
    ``r``.

    Every candidate overlap is compared from scratch, so this is
    O(len(q) * len(r)) in the worst case.
    """
    r = r_star[:-1]

    for trim in range(min(len(q), len(r)), 0, -1):
        if r.endswith(q[:trim]):
            return prefix + r_star + q[trim:] + suffix

    return prefix + r_star + q + suffix


def intersect_all(patterns: Iterable[str], *, strict: bool = False) -> Optional[str]:
    """Fold `intersect_patterns` over `patterns`, from left to right.

    Returns ``"*"`` for no patterns and stops at the first empty result.
    """
    iterator = iter(patterns)
    result = next(iterator, None)
    if result is None:
        return WILDCARD

    if strict and not is_valid_pattern(result):
        raise InvalidPatternError("x", result)

    for pattern in iterator:
        intersection = intersect_patterns(result, pattern, strict=strict)
        if intersection is None:
            logger.debug(f"{result!r} and {pattern!r} have no common match.")
            return None
        result = intersection

    return result
