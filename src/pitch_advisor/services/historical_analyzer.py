import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TypeVar

from pitch_advisor.config import EngineSettings
from pitch_advisor.domain.historical import HistoricalPitch, PitchSituation
from pitch_advisor.domain.pitch import PITCH_LOCATIONS, PITCH_TYPES, PitchLocation, PitchType
from pitch_advisor.domain.recommendation import DataDrivenResult
from pitch_advisor.domain.scores import ScoreMaps
from pitch_advisor.scoring.adjustments import round_half_up
from pitch_advisor.scoring.similarity import situation_similarity

logger = logging.getLogger(__name__)

K = TypeVar("K")

NO_DATA_INSIGHT = "No historical data available"

STRONG_MATCH = 0.8
MODERATE_MATCH = 0.6
SUCCESS_INSIGHT_RATE = 0.5
MAX_NAMED_PITCHERS = 3


@dataclass
class _Tally:
    success: int = 0
    total: int = 0
    weighted_success: float = 0.0

    @property
    def rate(self) -> float:
        return self.success / self.total

    def add(self, success: bool, similarity: float) -> None:
        self.total += 1
        if success:
            self.success += 1
            self.weighted_success += similarity


@dataclass(frozen=True)
class ScoredRecord:
    record: HistoricalPitch
    similarity: float


def find_similar_records(
    situation: PitchSituation,
    records: Iterable[HistoricalPitch],
    threshold: float = 0.4,
    limit: int = 100,
) -> list[ScoredRecord]:
    """Records at or above the similarity threshold, most similar first, capped at ``limit``."""
    scored = [ScoredRecord(r, situation_similarity(situation, r)) for r in records]
    similar = [s for s in scored if s.similarity >= threshold]
    similar.sort(key=lambda s: s.similarity, reverse=True)
    return similar[:limit]


def _match_quality_insight(similar: Sequence[ScoredRecord], threshold: float) -> str:
    exact = strong = moderate = weak = 0
    for s in similar:
        if s.similarity >= 1.0:
            exact += 1
        elif s.similarity >= STRONG_MATCH:
            strong += 1
        elif s.similarity >= MODERATE_MATCH:
            moderate += 1
        elif s.similarity >= threshold:
            weak += 1
    return f"Match quality: {exact} exact, {strong} strong, {moderate} moderate, {weak} weak"


def _pitcher_insight(names: Sequence[str]) -> str:
    if len(names) == 1:
        return f"{names[0]} has had success with this pitch selection"
    if len(names) <= MAX_NAMED_PITCHERS:
        return f"Pitchers like {', '.join(names)} have had success with this approach"
    return f"{len(names)} pitchers have had success with this approach"


def _percent(rate: float) -> int:
    return round_half_up(rate * 100)


def _scored_tallies(tallies: Mapping[K, _Tally], min_data_points: int) -> dict[K, _Tally]:
    return {key: tally for key, tally in tallies.items() if tally.total >= min_data_points}


def analyze_historical_data(
    situation: PitchSituation,
    records: Sequence[HistoricalPitch],
    settings: EngineSettings | None = None,
) -> DataDrivenResult:
    """Score pitch types and locations from historical outcomes in similar situations.

    Records are matched by similarity rather than exact equality. Each type and
    location with enough observations is scored as its similarity-weighted
    success rate on a 0-10 scale. Never raises on an empty or unmatched
    dataset; those cases come back as zero scores with an explanatory insight.
    """
    settings = settings or EngineSettings()
    scores = ScoreMaps.zeros()
    logger.debug("Processing data-driven recommendation with %d historical records", len(records))

    if not records:
        return DataDrivenResult(scores=scores, insights=(NO_DATA_INSIGHT,))

    similar = find_similar_records(
        situation, records, settings.similarity_threshold, settings.max_similar_records
    )
    logger.debug("Found %d similar pitches for count %s", len(similar), situation.count)

    if not similar:
        threshold_pct = _percent(settings.similarity_threshold)
        return DataDrivenResult(
            scores=scores,
            insights=(f"No similar historical situations found (similarity threshold {threshold_pct}%)",),
        )

    type_tallies: dict[PitchType, _Tally] = {t: _Tally() for t in PITCH_TYPES}
    location_tallies: dict[PitchLocation, _Tally] = {loc: _Tally() for loc in PITCH_LOCATIONS}
    pitcher_names: list[str] = []

    for scored in similar:
        record = scored.record
        type_tallies[record.type].add(record.is_success, scored.similarity)
        location_tallies[record.location].add(record.is_success, scored.similarity)
        name = record.pitcher_name
        if record.is_success and name and name not in pitcher_names:
            pitcher_names.append(name)

    scored_types = _scored_tallies(type_tallies, settings.min_data_points)
    scored_locations = _scored_tallies(location_tallies, settings.min_data_points)

    for pitch_type, tally in scored_types.items():
        scores.type_scores[pitch_type] = round_half_up(tally.weighted_success / tally.total * 10)
    for location, tally in scored_locations.items():
        scores.location_scores[location] = round_half_up(tally.weighted_success / tally.total * 10)

    insights = [_match_quality_insight(similar, settings.similarity_threshold)]
    success_insights: list[str] = []
    for pitch_type, tally in scored_types.items():
        if tally.rate >= SUCCESS_INSIGHT_RATE:
            success_insights.append(
                f"{pitch_type} has a {_percent(tally.rate)}% success rate in similar situations "
                f"({tally.success}/{tally.total})"
            )
    for location, tally in scored_locations.items():
        if tally.rate >= SUCCESS_INSIGHT_RATE:
            success_insights.append(
                f"{location} location has a {_percent(tally.rate)}% success rate ({tally.success}/{tally.total})"
            )
    insights.extend(success_insights)

    if not success_insights and scored_types:
        best_type, best = max(scored_types.items(), key=lambda item: item[1].rate)
        insights.append(
            f"{best_type} is historically the most effective pitch in this situation "
            f"({_percent(best.rate)}% success - {best.success}/{best.total})"
        )

    insights.append(f"Analysis based on {len(similar)} similar historical pitches")
    if pitcher_names:
        insights.append(_pitcher_insight(pitcher_names))

    return DataDrivenResult(scores=scores, insights=tuple(insights), pitcher_names=tuple(pitcher_names))
