"""Next-pitch recommendations from the at-bat state and historical pitch outcomes."""

from pitch_advisor.services import (
    PitchRecommender,
    get_historical_data_count,
    recommend_next_pitch,
    set_historical_data,
)

__all__ = ["PitchRecommender", "get_historical_data_count", "recommend_next_pitch", "set_historical_data"]
