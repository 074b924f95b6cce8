from dataclasses import dataclass, field
from typing import Any

from pitch_advisor.domain.pitch import PitchLocation, PitchType
from pitch_advisor.domain.scores import ScoreMaps


@dataclass(frozen=True)
class DataDrivenResult:
    scores: ScoreMaps
    insights: tuple[str, ...]
    pitcher_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class DebugInfo:
    historical_record_count: int
    timings: dict[str, float]
    rule_scores: ScoreMaps
    data_scores: ScoreMaps
    merged_scores: ScoreMaps
    raw_type: PitchType | None = None
    raw_location: PitchLocation | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "historicalRecordCount": self.historical_record_count,
            "timings": dict(self.timings),
            "ruleBasedScores": self.rule_scores.to_dict(),
            "dataBasedScores": self.data_scores.to_dict(),
            "mergedScores": self.merged_scores.to_dict(),
            "rawSelection": {
                "type": str(self.raw_type) if self.raw_type else None,
                "location": str(self.raw_location) if self.raw_location else None,
            },
        }


@dataclass(frozen=True)
class Recommendation:
    type: PitchType
    location: PitchLocation
    insights: tuple[str, ...] | None = None
    pitcher_names: tuple[str, ...] | None = None
    debug_info: DebugInfo | None = field(default=None, compare=False)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": str(self.type), "location": str(self.location)}
        if self.insights is not None:
            out["insights"] = list(self.insights)
        if self.pitcher_names is not None:
            out["pitcherNames"] = list(self.pitcher_names)
        if self.debug_info is not None:
            out["debugInfo"] = self.debug_info.to_dict()
        return out
