import logging

from pitch_advisor.domain.historical import PitchSituation
from pitch_advisor.domain.pitch import Handedness, PitchLocation, PitchType
from pitch_advisor.domain.scores import ScoreMaps
from pitch_advisor.scoring.adjustments import Rule, ScoreAdjustment, apply_first_match

logger = logging.getLogger(__name__)

T = PitchType
L = PitchLocation

MATCHUP_RULES: tuple[Rule[PitchSituation], ...] = (
    Rule(
        "same_side",
        lambda s: s.same_side,
        ScoreAdjustment(
            types={T.SLIDER: 3, T.CURVEBALL: 2, T.FASTBALL: 1},
            locations={L.LOW_OUTSIDE: 3, L.MIDDLE_OUTSIDE: 2, L.HIGH_OUTSIDE: 2, L.HIGH_INSIDE: 1},
        ),
    ),
    Rule(
        "opposite_lefty",
        lambda s: s.pitcher_handedness == Handedness.LEFT,
        ScoreAdjustment(
            types={T.CHANGEUP: 3, T.SINKER: 3, T.FASTBALL: 2, T.SPLITTER: 2, T.SLIDER: -1, T.CURVEBALL: -1},
            locations={L.LOW_OUTSIDE: 2, L.HIGH_INSIDE: 2},
        ),
    ),
    Rule(
        "opposite_righty",
        lambda s: s.pitcher_handedness == Handedness.RIGHT,
        ScoreAdjustment(
            types={T.SLIDER: 3, T.CUTTER: 3, T.CHANGEUP: 2},
            locations={L.LOW_OUTSIDE: 2, L.HIGH_INSIDE: 2, L.MIDDLE_OUTSIDE: 1},
        ),
    ),
)

PITCHER_HAND_BONUS: dict[Handedness, ScoreAdjustment] = {
    Handedness.RIGHT: ScoreAdjustment(types={T.FASTBALL: 1, T.CURVEBALL: 1}),
    Handedness.LEFT: ScoreAdjustment(types={T.FASTBALL: 1, T.CHANGEUP: 1}),
}


def apply_handedness_scoring(scores: ScoreMaps, situation: PitchSituation) -> str | None:
    matchup = apply_first_match(MATCHUP_RULES, scores, situation)
    PITCHER_HAND_BONUS[situation.pitcher_handedness].apply(scores)
    logger.debug(
        "Handedness %s batter vs %s pitcher scored as %s",
        situation.batter_handedness,
        situation.pitcher_handedness,
        matchup,
    )
    return matchup
