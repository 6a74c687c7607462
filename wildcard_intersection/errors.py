from __future__ import annotations

from typing import Literal

Argument = Literal["x", "y"]


class InvalidPatternError(ValueError):
    """A pattern turned out to hold more than one wildcard."""

    def __init__(self, argument: Argument, pattern: str) -> None:
        super().__init__(f"Pattern {pattern} contains multiple wildcards")
        self.argument = argument
        self.pattern = pattern
