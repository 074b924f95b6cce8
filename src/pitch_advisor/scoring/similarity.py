from pitch_advisor.domain.historical import HistoricalPitch, PitchSituation
from pitch_advisor.domain.pitch import Count

MAX_POINTS = 10.0


def count_points(current: Count, historical: Count) -> int:
    """Count proximity, worth up to 4 points. Only the first matching branch scores."""
    if current.balls == historical.balls and current.strikes == historical.strikes:
        return 4
    if (current.strikes == 2 and historical.strikes == 2) or (current.balls == 3 and historical.balls == 3):
        return 3
    if current.balls + current.strikes == historical.balls + historical.strikes:
        return 2
    if abs(current.balls - historical.balls) <= 1 and abs(current.strikes - historical.strikes) <= 1:
        return 1
    return 0


def handedness_points(situation: PitchSituation, record: HistoricalPitch) -> int:
    """Handedness agreement, worth up to 6 points."""
    batter_match = situation.batter_handedness == record.batter_handedness
    pitcher_match = situation.pitcher_handedness == record.pitcher_handedness
    if batter_match and pitcher_match:
        return 6
    if batter_match:
        return 3
    if pitcher_match:
        return 3
    return 0


def situation_similarity(situation: PitchSituation, record: HistoricalPitch) -> float:
    """Similarity in [0, 1] between the live situation and a historical record.

    1.0 exactly when the count and both handedness fields match.
    """
    points = count_points(situation.count, record.count) + handedness_points(situation, record)
    return points / MAX_POINTS
