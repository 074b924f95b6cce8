import pytest

from pitch_advisor.domain.pitch import Count, PitchLocation, PitchType
from pitch_advisor.domain.scores import ScoreMaps
from pitch_advisor.scoring.count_rules import COUNT_RULES, apply_count_scoring


def _score(balls: int, strikes: int) -> tuple[ScoreMaps, str | None]:
    scores = ScoreMaps.zeros()
    bucket = apply_count_scoring(scores, Count(balls, strikes))
    return scores, bucket


class TestCountBuckets:
    @pytest.mark.parametrize(
        ("balls", "strikes", "bucket"),
        [
            (0, 2, "two_strike"),
            (1, 2, "two_strike"),
            (3, 0, "three_ball"),
            (3, 1, "three_ball"),
            (0, 0, "even"),
            (1, 1, "even"),
            (2, 2, "even"),
            (3, 2, None),
            (1, 0, "behind"),
            (2, 1, "behind"),
            (0, 1, "ahead"),
        ],
    )
    def test_bucket(self, balls: int, strikes: int, bucket: str | None) -> None:
        assert _score(balls, strikes)[1] == bucket

    def test_rule_order(self) -> None:
        assert [rule.name for rule in COUNT_RULES] == [
            "two_strike",
            "three_ball",
            "even",
            "first_pitch",
            "behind",
            "ahead",
        ]


class TestCountAdjustments:
    def test_two_strikes(self) -> None:
        scores, _ = _score(0, 2)
        assert scores.type_scores[PitchType.CURVEBALL] == 3
        assert scores.type_scores[PitchType.SLIDER] == 3
        assert scores.type_scores[PitchType.CHANGEUP] == 2
        assert scores.location_scores[PitchLocation.LOW_OUTSIDE] == 3
        assert scores.type_scores[PitchType.FASTBALL] == 0

    def test_three_balls(self) -> None:
        scores, _ = _score(3, 0)
        assert scores.type_scores[PitchType.FASTBALL] == 4
        assert scores.location_scores[PitchLocation.MIDDLE_MIDDLE] == 2

    def test_first_pitch_uses_even_bonuses(self) -> None:
        scores, _ = _score(0, 0)
        assert scores.type_scores[PitchType.FASTBALL] == 2
        assert scores.type_scores[PitchType.CUTTER] == 0

    def test_only_one_bucket_applies(self) -> None:
        scores, _ = _score(1, 2)
        assert sum(scores.type_scores.values()) == 8
