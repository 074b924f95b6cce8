from collections.abc import Sequence
from dataclasses import dataclass

from pitch_advisor.domain.historical import PitchSituation
from pitch_advisor.domain.pitch import Pitch
from pitch_advisor.domain.scores import ScoreMaps
from pitch_advisor.scoring.count_rules import apply_count_scoring
from pitch_advisor.scoring.handedness_rules import apply_handedness_scoring
from pitch_advisor.scoring.pattern_rules import apply_pattern_recognition


@dataclass(frozen=True)
class RuleTrace:
    count_bucket: str | None
    sequence_rule: str | None
    matchup: str | None


def apply_rule_based_scoring(
    scores: ScoreMaps,
    situation: PitchSituation,
    pitches: Sequence[Pitch] | None = None,
) -> RuleTrace:
    """Run the count, pattern and handedness passes, accumulating into ``scores``.

    Args:
        scores: Dense score maps, updated in place.
        situation: Current count and handedness.
        pitches: At-bat history for pattern recognition; defaults to
            ``situation.previous_pitches``.

    Returns:
        The names of the rules that fired in each pass.
    """
    history = situation.previous_pitches if pitches is None else pitches
    count_bucket = apply_count_scoring(scores, situation.count)
    sequence_rule = apply_pattern_recognition(scores, history)
    matchup = apply_handedness_scoring(scores, situation)
    return RuleTrace(count_bucket=count_bucket, sequence_rule=sequence_rule, matchup=matchup)


def rule_based_scores(situation: PitchSituation, pitches: Sequence[Pitch] | None = None) -> ScoreMaps:
    scores = ScoreMaps.zeros()
    apply_rule_based_scoring(scores, situation, pitches)
    return scores
