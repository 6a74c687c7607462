from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, RootModel

from wildcard_intersection.intersection import intersect_patterns
from wildcard_intersection.patterns import (
    WILDCARD,
    PatternText,
    literal_prefix,
    literal_suffix,
    matches,
)


class WildcardPattern(RootModel[PatternText]):
    model_config = ConfigDict(frozen=True)

    def __init__(self, root: PatternText = "") -> None:
        super().__init__(root=root)

    def __and__(self, other: WildcardPattern) -> Optional[WildcardPattern]:
        intersection = intersect_patterns(self.root, other.root)
        if intersection is None:
            return None
        return WildcardPattern(intersection)

    def __str__(self) -> str:
        return self.root

    @property
    def prefix(self) -> str:
        return literal_prefix(self.root)

    @property
    def suffix(self) -> str:
        return literal_suffix(self.root)

    @property
    def has_wildcard(self) -> bool:
        return WILDCARD in self.root

    def matches(self, text: str) -> bool:
        return matches(self.root, text)
