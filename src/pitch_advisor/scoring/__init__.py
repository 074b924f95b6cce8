"""Rule-based and similarity scoring for pitch recommendations."""

from pitch_advisor.scoring.rules import apply_rule_based_scoring
from pitch_advisor.scoring.similarity import situation_similarity

__all__ = ["apply_rule_based_scoring", "situation_similarity"]
