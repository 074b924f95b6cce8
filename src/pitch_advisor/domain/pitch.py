from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class PitchType(StrEnum):
    FASTBALL = "Fastball"
    CURVEBALL = "Curveball"
    SLIDER = "Slider"
    CHANGEUP = "Changeup"
    CUTTER = "Cutter"
    SINKER = "Sinker"
    SPLITTER = "Splitter"


class PitchLocation(StrEnum):
    # Strike zone, 3x3 grid
    HIGH_INSIDE = "High Inside"
    HIGH_MIDDLE = "High Middle"
    HIGH_OUTSIDE = "High Outside"
    MIDDLE_INSIDE = "Middle Inside"
    MIDDLE_MIDDLE = "Middle Middle"
    MIDDLE_OUTSIDE = "Middle Outside"
    LOW_INSIDE = "Low Inside"
    LOW_MIDDLE = "Low Middle"
    LOW_OUTSIDE = "Low Outside"
    # Ball zone, outer ring
    WAY_HIGH_INSIDE = "Way High Inside"
    WAY_HIGH = "Way High"
    WAY_HIGH_OUTSIDE = "Way High Outside"
    WAY_INSIDE = "Way Inside"
    WAY_OUTSIDE = "Way Outside"
    WAY_LOW_INSIDE = "Way Low Inside"
    WAY_LOW = "Way Low"
    WAY_LOW_OUTSIDE = "Way Low Outside"


class PitchResult(StrEnum):
    STRIKE = "Strike"
    BALL = "Ball"
    FOUL = "Foul"
    HIT = "Hit"
    OUT = "Out"
    HOME_RUN = "Home Run"


class Handedness(StrEnum):
    RIGHT = "Right"
    LEFT = "Left"


PITCH_TYPES: tuple[PitchType, ...] = tuple(PitchType)
PITCH_LOCATIONS: tuple[PitchLocation, ...] = tuple(PitchLocation)

STRIKE_ZONE_LOCATIONS: frozenset[PitchLocation] = frozenset(PITCH_LOCATIONS[:9])
BALL_ZONE_LOCATIONS: frozenset[PitchLocation] = frozenset(PITCH_LOCATIONS[9:])

TOP_HALF_LOCATIONS: frozenset[PitchLocation] = frozenset(
    {
        PitchLocation.HIGH_INSIDE,
        PitchLocation.HIGH_MIDDLE,
        PitchLocation.HIGH_OUTSIDE,
        PitchLocation.WAY_HIGH_INSIDE,
        PitchLocation.WAY_HIGH,
        PitchLocation.WAY_HIGH_OUTSIDE,
    }
)


@dataclass(frozen=True)
class Count:
    """Balls/strikes tally. Callers keep balls in 0..4 and strikes in 0..3."""

    balls: int = 0
    strikes: int = 0

    def __str__(self) -> str:
        return f"{self.balls}-{self.strikes}"

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Count":
        return cls(balls=int(raw.get("balls", 0)), strikes=int(raw.get("strikes", 0)))

    def to_dict(self) -> dict[str, int]:
        return {"balls": self.balls, "strikes": self.strikes}


@dataclass(frozen=True)
class Pitch:
    id: str
    type: PitchType
    location: PitchLocation
    result: PitchResult
    timestamp: float
    count_before: Count | None = None
    count_after: Count | None = None
    at_bat_result: str | None = None
    batter_handedness: Handedness | None = None
    pitcher_handedness: Handedness | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Pitch":
        """Build a pitch from the camelCase session shape."""
        count = raw.get("count") or {}
        before = count.get("before")
        after = count.get("after")
        batter = raw.get("batterHandedness")
        pitcher = raw.get("pitcherHandedness")
        return cls(
            id=str(raw.get("id", "")),
            type=PitchType(raw["type"]),
            location=PitchLocation(raw["location"]),
            result=PitchResult(raw["result"]),
            timestamp=float(raw.get("timestamp", 0)),
            count_before=Count.from_dict(before) if before else None,
            count_after=Count.from_dict(after) if after else None,
            at_bat_result=raw.get("atBatResult"),
            batter_handedness=Handedness(batter) if batter else None,
            pitcher_handedness=Handedness(pitcher) if pitcher else None,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "type": str(self.type),
            "location": str(self.location),
            "result": str(self.result),
            "timestamp": self.timestamp,
        }
        if self.count_before is not None or self.count_after is not None:
            out["count"] = {
                "before": self.count_before.to_dict() if self.count_before else None,
                "after": self.count_after.to_dict() if self.count_after else None,
            }
        if self.at_bat_result is not None:
            out["atBatResult"] = self.at_bat_result
        if self.batter_handedness is not None:
            out["batterHandedness"] = str(self.batter_handedness)
        if self.pitcher_handedness is not None:
            out["pitcherHandedness"] = str(self.pitcher_handedness)
        return out
