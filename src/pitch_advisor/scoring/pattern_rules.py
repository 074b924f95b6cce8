import logging
from collections import Counter
from collections.abc import Sequence

from pitch_advisor.domain.pitch import Pitch, PitchLocation, PitchResult, PitchType
from pitch_advisor.domain.scores import ScoreMaps
from pitch_advisor.scoring.adjustments import Rule, ScoreAdjustment, apply_first_match, round_half_up

logger = logging.getLogger(__name__)

T = PitchType
L = PitchLocation

RECENT_WINDOW = 5
REPEAT_PENALTY = 3
EFFECTIVENESS_WEIGHT = 4
SUCCESSFUL_RESULTS = frozenset({PitchResult.STRIKE, PitchResult.OUT})


def _boost_fastball_keep_location(scores: ScoreMaps, last: Pitch) -> None:
    scores.type_scores[T.FASTBALL] += 3
    scores.location_scores[last.location] += 1


SEQUENCE_RULES: tuple[Rule[Pitch], ...] = (
    Rule(
        "inside_fastball",
        lambda p: p.type == T.FASTBALL and p.location in (L.MIDDLE_INSIDE, L.HIGH_INSIDE),
        ScoreAdjustment(
            types={T.SLIDER: 2, T.CHANGEUP: 2},
            locations={L.LOW_OUTSIDE: 3, L.MIDDLE_OUTSIDE: 2},
        ),
    ),
    Rule(
        "low_breaking_ball",
        lambda p: p.type in (T.CURVEBALL, T.SLIDER) and p.location in (L.LOW_INSIDE, L.LOW_OUTSIDE),
        ScoreAdjustment(
            types={T.FASTBALL: 3},
            locations={L.HIGH_INSIDE: 2, L.HIGH_MIDDLE: 2},
        ),
    ),
    Rule("after_changeup", lambda p: p.type == T.CHANGEUP, _boost_fastball_keep_location),
)


def penalize_repeats(scores: ScoreMaps, recent: Sequence[Pitch]) -> None:
    """Discourage a third straight pitch of the same type."""
    if len(recent) >= 2 and recent[-1].type == recent[-2].type:
        scores.type_scores[recent[-1].type] -= REPEAT_PENALTY


def penalize_overused_locations(scores: ScoreMaps, recent: Sequence[Pitch]) -> None:
    if len(recent) < 3:
        return
    for location, occurrences in Counter(p.location for p in recent).items():
        if occurrences >= 2:
            scores.location_scores[location] -= occurrences


def boost_effective_pitches(scores: ScoreMaps, pitches: Sequence[Pitch]) -> None:
    """Reward pitch types that have worked across the whole at-bat."""
    thrown: Counter[PitchType] = Counter()
    successes: Counter[PitchType] = Counter()
    for pitch in pitches:
        thrown[pitch.type] += 1
        if pitch.result in SUCCESSFUL_RESULTS:
            successes[pitch.type] += 1
    for pitch_type, total in thrown.items():
        if total >= 2:
            scores.type_scores[pitch_type] += round_half_up(successes[pitch_type] / total * EFFECTIVENESS_WEIGHT)


def apply_pattern_recognition(scores: ScoreMaps, pitches: Sequence[Pitch]) -> str | None:
    """Adjust scores from the recent sequence; returns the sequencing rule that fired."""
    recent = list(pitches[-RECENT_WINDOW:])
    penalize_repeats(scores, recent)
    penalize_overused_locations(scores, recent)
    sequence = apply_first_match(SEQUENCE_RULES, scores, recent[-1]) if recent else None
    boost_effective_pitches(scores, pitches)
    logger.debug("Pattern pass over %d pitches, sequencing rule: %s", len(recent), sequence)
    return sequence
