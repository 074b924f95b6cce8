import random

import pytest

from pitch_advisor.config import EngineSettings
from pitch_advisor.domain.pitch import (
    TOP_HALF_LOCATIONS,
    Count,
    Handedness,
    Pitch,
    PitchLocation,
    PitchResult,
    PitchType,
)
from pitch_advisor.domain.recommendation import Recommendation
from pitch_advisor.repos.historical_pitch_repo import InMemoryHistoricalPitchRepo
from pitch_advisor.services.recommender import (
    FIRST_PITCH_INSIGHT,
    RANDOMNESS_INSIGHT,
    PitchRecommender,
    get_historical_data_count,
    get_recommender,
    recommend_next_pitch,
    set_historical_data,
    set_recommender,
    situation_from_history,
)
from pitch_advisor.services.safety_override import is_forbidden
from tests.helpers import make_pitch, make_record

T = PitchType
L = PitchLocation


def _one_pitch(balls: int = 1, strikes: int = 1) -> list[Pitch]:
    return [make_pitch(T.FASTBALL, L.MIDDLE_MIDDLE, PitchResult.STRIKE, count_after=Count(balls, strikes))]


class TestSituationFromHistory:
    def test_uses_last_pitch(self) -> None:
        pitches = [
            make_pitch(count_after=Count(0, 1)),
            make_pitch(count_after=Count(1, 1), batter=Handedness.LEFT, pitcher=Handedness.LEFT),
        ]
        situation = situation_from_history(pitches)
        assert situation.count == Count(1, 1)
        assert situation.batter_handedness == Handedness.LEFT
        assert situation.previous_pitches == tuple(pitches)

    def test_defaults(self) -> None:
        situation = situation_from_history([make_pitch(batter=None, pitcher=None)])
        assert situation.count == Count(0, 0)
        assert situation.batter_handedness == Handedness.RIGHT
        assert situation.pitcher_handedness == Handedness.RIGHT


class TestFirstPitch:
    def test_empty_history(self) -> None:
        assert PitchRecommender().recommend_next_pitch([]) == Recommendation(
            type=T.FASTBALL, location=L.MIDDLE_MIDDLE, insights=(FIRST_PITCH_INSIGHT,)
        )

    def test_empty_history_without_insights(self) -> None:
        recommendation = PitchRecommender().recommend_next_pitch([], include_insights=False)
        assert recommendation.insights is None
        assert recommendation.pitcher_names is None


class TestRecommendNextPitch:
    def test_deterministic_without_randomness(self) -> None:
        recommender = PitchRecommender()
        pitches = _one_pitch(3, 1)
        first = recommender.recommend_next_pitch(pitches, randomness=0)
        second = recommender.recommend_next_pitch(pitches, randomness=0)
        assert first == second

    def test_rules_only_three_one(self) -> None:
        recommendation = PitchRecommender().recommend_next_pitch(_one_pitch(3, 1), data_weight=0.0, randomness=0)
        assert recommendation.type == T.FASTBALL

    def test_insights_without_data(self) -> None:
        recommendation = PitchRecommender().recommend_next_pitch(_one_pitch(), randomness=0)
        assert recommendation.insights == ("No historical data available", RANDOMNESS_INSIGHT)
        assert recommendation.pitcher_names == ()

    def test_randomness_insight(self) -> None:
        recommender = PitchRecommender(rng=random.Random(5))
        recommendation = recommender.recommend_next_pitch(_one_pitch(), randomness=0.2)
        assert recommendation.insights is not None
        assert recommendation.insights[-1] == RANDOMNESS_INSIGHT

    def test_insights_disabled(self) -> None:
        recommender = PitchRecommender()
        recommender.set_historical_data([make_record(T.SLIDER, pitcher_name="Ace") for _ in range(3)])
        recommendation = recommender.recommend_next_pitch(_one_pitch(0, 0), include_insights=False)
        assert recommendation.insights is None
        assert recommendation.pitcher_names is None

    def test_data_drives_selection(self) -> None:
        recommender = PitchRecommender()
        recommender.set_historical_data(
            [make_record(T.CUTTER, L.LOW_INSIDE, balls=1, strikes=1, pitcher_name="Ace") for _ in range(5)]
        )
        recommendation = recommender.recommend_next_pitch(_one_pitch(1, 1), data_weight=1.0, randomness=0)
        assert recommendation.type == T.CUTTER
        assert recommendation.location == L.LOW_INSIDE
        assert recommendation.insights is not None
        assert "Cutter has a 100% success rate in similar situations (5/5)" in recommendation.insights
        assert recommendation.pitcher_names == ("Ace",)

    def test_override_moves_offspeed_out_of_top_half(self) -> None:
        recommender = PitchRecommender()
        recommender.set_historical_data(
            [make_record(T.SLIDER, L.HIGH_INSIDE, balls=1, strikes=1) for _ in range(5)]
        )
        recommendation = recommender.recommend_next_pitch(_one_pitch(1, 1), data_weight=1.0, randomness=0)
        assert recommendation.type == T.SLIDER
        assert recommendation.location == L.MIDDLE_INSIDE
        assert recommendation.insights is not None
        assert any(i.startswith("Moved Slider from High Inside to Middle Inside") for i in recommendation.insights)

    def test_settings_supply_defaults(self) -> None:
        recommender = PitchRecommender(settings=EngineSettings(data_weight=0.0, randomness=0))
        debug = recommender.recommend_next_pitch(_one_pitch(), include_debug=True).debug_info
        assert debug is not None
        # the most recent type gets no variety boost, so only rule scores remain
        assert debug.merged_scores.type_scores[T.FASTBALL] == debug.rule_scores.type_scores[T.FASTBALL]

    def test_randomness_note_always_present(self) -> None:
        recommendation = PitchRecommender().recommend_next_pitch(_one_pitch(), randomness=0)
        assert recommendation.insights is not None
        assert recommendation.insights[-1] == RANDOMNESS_INSIGHT

    def test_debug_info(self) -> None:
        recommender = PitchRecommender(repo=InMemoryHistoricalPitchRepo([make_record()]))
        recommendation = recommender.recommend_next_pitch(_one_pitch(), include_debug=True, randomness=0)
        debug = recommendation.debug_info
        assert debug is not None
        assert debug.historical_record_count == 1
        assert set(debug.timings) == {"rule_scoring", "historical_analysis", "merge", "selection"}
        assert debug.raw_type == recommendation.type
        debug.merged_scores.validate()
        assert "debugInfo" in recommendation.to_dict()

    def test_score_maps_dense_without_data(self) -> None:
        recommendation = PitchRecommender().recommend_next_pitch(_one_pitch(0, 2), include_debug=True)
        debug = recommendation.debug_info
        assert debug is not None
        for scores in (debug.rule_scores, debug.data_scores, debug.merged_scores):
            scores.validate()

    def test_no_debug_by_default(self) -> None:
        assert PitchRecommender().recommend_next_pitch(_one_pitch()).debug_info is None


class TestSafetyInvariant:
    def test_never_recommends_offspeed_up(self) -> None:
        rng = random.Random(1234)
        records = [
            make_record(t, loc, balls=b, strikes=s, success=rng.random() < 0.6)
            for t in (T.SLIDER, T.CHANGEUP)
            for loc in TOP_HALF_LOCATIONS
            for b in range(4)
            for s in range(3)
        ]
        recommender = PitchRecommender(rng=rng)
        recommender.set_historical_data(records)
        types = list(PitchType)
        locations = list(PitchLocation)
        results = [PitchResult.STRIKE, PitchResult.BALL, PitchResult.FOUL]
        for _ in range(1000):
            count = Count(rng.randrange(4), rng.randrange(3))
            pitches = [
                make_pitch(rng.choice(types), rng.choice(locations), rng.choice(results), count_after=count)
                for _ in range(rng.randrange(1, 6))
            ]
            recommendation = recommender.recommend_next_pitch(
                pitches, data_weight=rng.random(), randomness=rng.random()
            )
            assert not is_forbidden(recommendation.type, recommendation.location)


@pytest.mark.usefixtures("reset_recommender")
class TestModuleLevelFunctions:
    def test_set_and_count(self) -> None:
        assert get_historical_data_count() == 0
        assert set_historical_data([make_record(), make_record()]) == 2
        assert get_historical_data_count() == 2

    def test_replacement_not_append(self) -> None:
        set_historical_data([make_record(), make_record()])
        set_historical_data([make_record()])
        assert get_historical_data_count() == 1

    def test_recommend(self) -> None:
        assert recommend_next_pitch([]).insights == (FIRST_PITCH_INSIGHT,)

    def test_set_recommender(self) -> None:
        custom = PitchRecommender()
        set_recommender(custom)
        assert get_recommender() is custom
