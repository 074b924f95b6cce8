import logging

from pitch_advisor.domain.pitch import Count, PitchLocation, PitchType
from pitch_advisor.domain.scores import ScoreMaps
from pitch_advisor.scoring.adjustments import Rule, ScoreAdjustment, apply_first_match

logger = logging.getLogger(__name__)

T = PitchType
L = PitchLocation

# Evaluated in order, first match wins. The first-pitch bucket sits behind the
# even-count bucket, so 0-0 scores as an even count.
COUNT_RULES: tuple[Rule[Count], ...] = (
    Rule(
        "two_strike",
        lambda c: c.strikes == 2 and c.balls < 2,
        ScoreAdjustment(
            types={T.CURVEBALL: 3, T.SLIDER: 3, T.CHANGEUP: 2},
            locations={L.LOW_OUTSIDE: 3, L.LOW_INSIDE: 2, L.WAY_LOW_OUTSIDE: 2, L.WAY_LOW_INSIDE: 2},
        ),
    ),
    Rule(
        "three_ball",
        lambda c: c.balls == 3 and c.strikes < 2,
        ScoreAdjustment(
            types={T.FASTBALL: 4, T.CUTTER: 2},
            locations={L.MIDDLE_MIDDLE: 2, L.HIGH_MIDDLE: 1, L.LOW_MIDDLE: 1},
        ),
    ),
    Rule(
        "even",
        lambda c: c.balls == c.strikes,
        ScoreAdjustment(
            types={T.FASTBALL: 2, T.CHANGEUP: 2, T.SLIDER: 2},
            locations={L.LOW_OUTSIDE: 2, L.LOW_INSIDE: 2, L.HIGH_OUTSIDE: 1, L.HIGH_INSIDE: 1},
        ),
    ),
    Rule(
        "first_pitch",
        lambda c: c.balls == 0 and c.strikes == 0,
        ScoreAdjustment(
            types={T.FASTBALL: 3, T.CUTTER: 2},
            locations={L.LOW_OUTSIDE: 2, L.HIGH_INSIDE: 2},
        ),
    ),
    Rule(
        "behind",
        lambda c: c.balls > c.strikes and c.balls < 3,
        ScoreAdjustment(
            types={T.FASTBALL: 2, T.SINKER: 2},
            locations={L.MIDDLE_MIDDLE: 1, L.MIDDLE_INSIDE: 1, L.MIDDLE_OUTSIDE: 1},
        ),
    ),
    Rule(
        "ahead",
        lambda c: c.strikes > c.balls and c.strikes < 2,
        ScoreAdjustment(
            types={T.CHANGEUP: 2, T.SLIDER: 2},
            locations={L.LOW_OUTSIDE: 2, L.HIGH_INSIDE: 2, L.WAY_OUTSIDE: 1},
        ),
    ),
)


def apply_count_scoring(scores: ScoreMaps, count: Count) -> str | None:
    """Add the bonuses for the single count bucket that applies."""
    bucket = apply_first_match(COUNT_RULES, scores, count)
    logger.debug("Count %s scored as %s", count, bucket or "no bucket")
    return bucket
