from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TypeVar

from pitch_advisor.domain.pitch import PITCH_LOCATIONS, PITCH_TYPES, PitchLocation, PitchType
from pitch_advisor.exceptions import PitchAdvisorException

K = TypeVar("K")


class ScoreCoverageError(PitchAdvisorException):
    def __init__(self, map_name: str, missing: Iterable[str], extra: Iterable[str]) -> None:
        self.map_name = map_name
        self.missing = tuple(sorted(missing))
        self.extra = tuple(sorted(extra))
        super().__init__(f"{map_name} must cover the full enumeration (missing={self.missing}, extra={self.extra})")


def _zero_types() -> dict[PitchType, float]:
    return dict.fromkeys(PITCH_TYPES, 0.0)


def _zero_locations() -> dict[PitchLocation, float]:
    return dict.fromkeys(PITCH_LOCATIONS, 0.0)


def highest_scoring_key(scores: Mapping[K, float], exclude: Iterable[K] = ()) -> K:
    """Return the key with the highest score; ties go to the earliest key."""
    excluded = set(exclude)
    best: K | None = None
    best_score = float("-inf")
    for key, score in scores.items():
        if key in excluded:
            continue
        if best is None or score > best_score:
            best = key
            best_score = score
    if best is None:
        raise ValueError("No candidate keys left to choose from")
    return best


@dataclass
class ScoreMaps:
    """Dense pitch-type and location score maps.

    Values are unbounded reals; only their relative order matters.
    """

    type_scores: dict[PitchType, float] = field(default_factory=_zero_types)
    location_scores: dict[PitchLocation, float] = field(default_factory=_zero_locations)

    @classmethod
    def zeros(cls) -> "ScoreMaps":
        return cls()

    def copy(self) -> "ScoreMaps":
        return ScoreMaps(type_scores=dict(self.type_scores), location_scores=dict(self.location_scores))

    def validate(self) -> None:
        type_keys = set(self.type_scores)
        location_keys = set(self.location_scores)
        if type_keys != set(PITCH_TYPES):
            raise ScoreCoverageError("type_scores", set(PITCH_TYPES) - type_keys, type_keys - set(PITCH_TYPES))
        if location_keys != set(PITCH_LOCATIONS):
            raise ScoreCoverageError(
                "location_scores", set(PITCH_LOCATIONS) - location_keys, location_keys - set(PITCH_LOCATIONS)
            )

    def best_type(self) -> PitchType:
        return highest_scoring_key(self.type_scores)

    def best_location(self, exclude: Iterable[PitchLocation] = ()) -> PitchLocation:
        return highest_scoring_key(self.location_scores, exclude)

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {
            "typeScores": {str(k): v for k, v in self.type_scores.items()},
            "locationScores": {str(k): v for k, v in self.location_scores.items()},
        }
