import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pitch_advisor.domain.pitch import PitchLocation, PitchType
from pitch_advisor.domain.scores import ScoreMaps

T = TypeVar("T")


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class ScoreAdjustment:
    """Fixed increments added to a score map; usable directly as a rule effect."""

    types: Mapping[PitchType, float] = field(default_factory=dict)
    locations: Mapping[PitchLocation, float] = field(default_factory=dict)

    def apply(self, scores: ScoreMaps) -> None:
        for pitch_type, delta in self.types.items():
            scores.type_scores[pitch_type] += delta
        for location, delta in self.locations.items():
            scores.location_scores[location] += delta

    def __call__(self, scores: ScoreMaps, _subject: object) -> None:
        self.apply(scores)


@dataclass(frozen=True)
class Rule(Generic[T]):
    name: str
    predicate: Callable[[T], bool]
    effect: Callable[[ScoreMaps, T], None]


def apply_first_match(rules: Iterable[Rule[T]], scores: ScoreMaps, subject: T) -> str | None:
    """Apply the first rule whose predicate holds and return its name."""
    for rule in rules:
        if rule.predicate(subject):
            rule.effect(scores, subject)
            return rule.name
    return None
