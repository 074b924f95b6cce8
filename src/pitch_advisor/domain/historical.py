from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pitch_advisor.domain.pitch import Count, Handedness, Pitch, PitchLocation, PitchType


class Outcome(StrEnum):
    SUCCESSFUL = "Successful"
    UNSUCCESSFUL = "Unsuccessful"


_METADATA_KEYS = {
    "date": "date",
    "pitcher": "pitcher",
    "velocity": "velocity",
    "spinRate": "spin_rate",
    "horizontalBreak": "horizontal_break",
    "verticalBreak": "vertical_break",
    "plateX": "plate_x",
    "plateZ": "plate_z",
}


@dataclass(frozen=True)
class PitchMetadata:
    date: str | None = None
    pitcher: str | None = None
    velocity: float | None = None
    spin_rate: float | None = None
    horizontal_break: float | None = None
    vertical_break: float | None = None
    plate_x: float | None = None
    plate_z: float | None = None
    extra: dict[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "PitchMetadata":
        known: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in raw.items():
            if key in _METADATA_KEYS:
                known[_METADATA_KEYS[key]] = value
            else:
                extra[key] = value
        return cls(**known, extra=extra)


@dataclass(frozen=True)
class HistoricalPitch:
    type: PitchType
    location: PitchLocation
    count: Count
    batter_handedness: Handedness
    pitcher_handedness: Handedness
    result: Outcome
    situation_id: str | None = None
    metadata: PitchMetadata | None = None

    @property
    def is_success(self) -> bool:
        return self.result == Outcome.SUCCESSFUL

    @property
    def pitcher_name(self) -> str | None:
        if self.metadata is None:
            return None
        return self.metadata.pitcher or None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "HistoricalPitch":
        """Build a record from the camelCase upload shape.

        Raises KeyError or ValueError when a required field is missing or
        holds a value outside its enumeration.
        """
        metadata = raw.get("metadata")
        return cls(
            type=PitchType(raw["type"]),
            location=PitchLocation(raw["location"]),
            count=Count.from_dict(raw["count"]),
            batter_handedness=Handedness(raw["batterHandedness"]),
            pitcher_handedness=Handedness(raw["pitcherHandedness"]),
            result=Outcome(raw["result"]),
            situation_id=raw.get("situationId"),
            metadata=PitchMetadata.from_dict(metadata) if metadata else None,
        )


@dataclass(frozen=True)
class PitchSituation:
    """Scoring input derived from the latest session state."""

    count: Count
    batter_handedness: Handedness
    pitcher_handedness: Handedness
    previous_pitches: tuple[Pitch, ...] = ()

    @property
    def same_side(self) -> bool:
        return self.batter_handedness == self.pitcher_handedness
