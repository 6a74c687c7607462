from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic_yaml import parse_yaml_file_as, to_yaml_str

from wildcard_intersection.errors import Argument, InvalidPatternError
from wildcard_intersection.intersection import intersect_patterns


class PairResult(BaseModel):
    x: str
    y: str
    name: Optional[str] = None
    intersection: Optional[str] = None
    error: Optional[str] = None
    invalid_argument: Optional[Argument] = None
    model_config = ConfigDict(frozen=True)


class PairResults(RootModel[tuple[PairResult, ...]]):
    model_config = ConfigDict(frozen=True)

    def __iter__(self):
        yield from self.root.__iter__()

    @property
    def has_errors(self) -> bool:
        return any(result.error is not None for result in self)

    def to_yaml(self) -> str:
        return to_yaml_str(self)


class PatternPair(BaseModel):
    # x and y stay plain strings so that malformed patterns reach the
    # intersection and are reported from there.
    x: str
    y: str
    name: Optional[str] = None
    model_config = ConfigDict(frozen=True)

    def intersect(self, strict: bool = False) -> PairResult:
        try:
            intersection = intersect_patterns(self.x, self.y, strict=strict)
        except InvalidPatternError as e:
            return PairResult(
                x=self.x,
                y=self.y,
                name=self.name,
                error=str(e),
                invalid_argument=e.argument,
            )

        return PairResult(
            x=self.x, y=self.y, name=self.name, intersection=intersection
        )


class PatternPairs(RootModel[tuple[PatternPair, ...]]):
    model_config = ConfigDict(frozen=True)

    def __iter__(self):
        yield from self.root.__iter__()

    def __len__(self) -> int:
        return len(self.root)

    def __add__(self, other: PatternPairs) -> PatternPairs:
        return PatternPairs(root=self.root + other.root)

    def intersect(self, strict: bool = False) -> PairResults:
        return PairResults(root=tuple(pair.intersect(strict=strict) for pair in self))

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> PatternPairs:
        return parse_yaml_file_as(cls, yaml_path)
