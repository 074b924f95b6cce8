import logging
import random
import time
from collections.abc import Iterable, Sequence

from pitch_advisor.config import EngineSettings
from pitch_advisor.domain.historical import HistoricalPitch, PitchSituation
from pitch_advisor.domain.pitch import Count, Handedness, Pitch, PitchLocation, PitchType
from pitch_advisor.domain.recommendation import DebugInfo, Recommendation
from pitch_advisor.domain.scores import ScoreMaps
from pitch_advisor.repos.historical_pitch_repo import InMemoryHistoricalPitchRepo
from pitch_advisor.repos.protocols import HistoricalPitchRepo
from pitch_advisor.scoring.rules import apply_rule_based_scoring
from pitch_advisor.services.historical_analyzer import analyze_historical_data
from pitch_advisor.services.safety_override import apply_top_half_penalty, resolve_selection
from pitch_advisor.services.score_merger import merge_scores

logger = logging.getLogger(__name__)

FIRST_PITCH_INSIGHT = "First pitch recommendation (no prior data)"
RANDOMNESS_INSIGHT = "Randomness applied to prevent repetitive recommendations"
RECENT_CHOICES = 3


def situation_from_history(pitches: Sequence[Pitch]) -> PitchSituation:
    """Derive the live situation from the last pitch, defaulting to 0-0 and right-handed."""
    last = pitches[-1]
    return PitchSituation(
        count=last.count_after or Count(0, 0),
        batter_handedness=last.batter_handedness or Handedness.RIGHT,
        pitcher_handedness=last.pitcher_handedness or Handedness.RIGHT,
        previous_pitches=tuple(pitches),
    )


class PitchRecommender:
    """Runs the recommendation pipeline against an injected historical data store.

    Stages: rule scoring, historical analysis, merge (with randomness and
    variety promotion), top-half penalty, arg-max selection, safety override.
    """

    def __init__(
        self,
        repo: HistoricalPitchRepo | None = None,
        settings: EngineSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._repo = repo if repo is not None else InMemoryHistoricalPitchRepo()
        self._settings = settings or EngineSettings()
        self._rng = rng

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def set_historical_data(self, records: Iterable[HistoricalPitch]) -> int:
        return self._repo.replace_all(records)

    def get_historical_data_count(self) -> int:
        return self._repo.count()

    def recommend_next_pitch(
        self,
        pitches: Sequence[Pitch],
        *,
        data_weight: float | None = None,
        include_insights: bool = True,
        randomness: float | None = None,
        include_debug: bool = False,
    ) -> Recommendation:
        if not pitches:
            return Recommendation(
                type=PitchType.FASTBALL,
                location=PitchLocation.MIDDLE_MIDDLE,
                insights=(FIRST_PITCH_INSIGHT,) if include_insights else None,
            )

        data_weight = self._settings.data_weight if data_weight is None else data_weight
        randomness = self._settings.randomness if randomness is None else randomness
        timings: dict[str, float] = {}
        situation = situation_from_history(pitches)

        started = time.perf_counter()
        rule_scores = ScoreMaps.zeros()
        trace = apply_rule_based_scoring(rule_scores, situation)
        timings["rule_scoring"] = time.perf_counter() - started
        logger.debug("Rule passes: %s", trace)

        started = time.perf_counter()
        records = self._repo.all()
        data_result = analyze_historical_data(situation, records, self._settings)
        timings["historical_analysis"] = time.perf_counter() - started

        started = time.perf_counter()
        recent = pitches[-RECENT_CHOICES:]
        merged = merge_scores(
            rule_scores,
            data_result.scores,
            data_weight,
            randomness=randomness,
            recent_types=[p.type for p in recent],
            recent_locations=[p.location for p in recent],
            variety_boost=self._settings.variety_boost,
            rng=self._rng,
        )
        apply_top_half_penalty(merged, self._settings.top_half_penalty)
        timings["merge"] = time.perf_counter() - started

        started = time.perf_counter()
        raw_type = merged.best_type()
        raw_location = merged.best_location()
        selection = resolve_selection(merged, raw_type, raw_location)
        timings["selection"] = time.perf_counter() - started

        logger.debug(
            "Recommending %s / %s at %s (raw %s / %s)",
            selection.type,
            selection.location,
            situation.count,
            raw_type,
            raw_location,
        )

        insights: tuple[str, ...] | None = None
        pitcher_names: tuple[str, ...] | None = None
        if include_insights:
            collected = list(data_result.insights)
            if selection.insight:
                collected.append(selection.insight)
            collected.append(RANDOMNESS_INSIGHT)
            insights = tuple(collected)
            pitcher_names = data_result.pitcher_names

        debug_info = None
        if include_debug:
            debug_info = DebugInfo(
                historical_record_count=len(records),
                timings=timings,
                rule_scores=rule_scores,
                data_scores=data_result.scores,
                merged_scores=merged,
                raw_type=raw_type,
                raw_location=raw_location,
            )

        return Recommendation(
            type=selection.type,
            location=selection.location,
            insights=insights,
            pitcher_names=pitcher_names,
            debug_info=debug_info,
        )


_recommender: PitchRecommender | None = None


def get_recommender() -> PitchRecommender:
    """Get the process-wide recommender, creating one if needed."""
    global _recommender
    if _recommender is None:
        _recommender = PitchRecommender()
    return _recommender


def set_recommender(recommender: PitchRecommender | None) -> None:
    """Set or reset the process-wide recommender.

    Pass None to reset, which drops the stored historical data.
    """
    global _recommender
    _recommender = recommender


def recommend_next_pitch(
    pitches: Sequence[Pitch],
    *,
    data_weight: float | None = None,
    include_insights: bool = True,
    randomness: float | None = None,
    include_debug: bool = False,
) -> Recommendation:
    return get_recommender().recommend_next_pitch(
        pitches,
        data_weight=data_weight,
        include_insights=include_insights,
        randomness=randomness,
        include_debug=include_debug,
    )


def set_historical_data(records: Iterable[HistoricalPitch]) -> int:
    return get_recommender().set_historical_data(records)


def get_historical_data_count() -> int:
    return get_recommender().get_historical_data_count()
