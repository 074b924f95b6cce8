"""Recommendation pipeline services."""

from pitch_advisor.services.at_bat import AtBatSession, next_count
from pitch_advisor.services.historical_analyzer import analyze_historical_data
from pitch_advisor.services.recommender import (
    PitchRecommender,
    get_historical_data_count,
    get_recommender,
    recommend_next_pitch,
    set_historical_data,
    set_recommender,
)
from pitch_advisor.services.score_merger import merge_scores

__all__ = [
    "AtBatSession",
    "PitchRecommender",
    "analyze_historical_data",
    "get_historical_data_count",
    "get_recommender",
    "merge_scores",
    "next_count",
    "recommend_next_pitch",
    "set_historical_data",
    "set_recommender",
]
