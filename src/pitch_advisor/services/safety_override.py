import logging
from dataclasses import dataclass

from pitch_advisor.domain.pitch import TOP_HALF_LOCATIONS, PitchLocation, PitchType
from pitch_advisor.domain.scores import ScoreMaps

logger = logging.getLogger(__name__)

PENALIZED_TYPES: frozenset[PitchType] = frozenset({PitchType.SLIDER, PitchType.CHANGEUP})


def is_forbidden(pitch_type: PitchType, location: PitchLocation) -> bool:
    return pitch_type in PENALIZED_TYPES and location in TOP_HALF_LOCATIONS


def apply_top_half_penalty(scores: ScoreMaps, penalty: float = 10.0) -> bool:
    """Push every top-half location down when the current leaders form a forbidden pairing.

    Returns True when the penalty was applied.
    """
    if not is_forbidden(scores.best_type(), scores.best_location()):
        return False
    for location in TOP_HALF_LOCATIONS:
        scores.location_scores[location] -= penalty
    logger.debug("Applied top-half penalty of %s for %s", penalty, scores.best_type())
    return True


@dataclass(frozen=True)
class FinalSelection:
    type: PitchType
    location: PitchLocation
    overridden: bool = False
    insight: str | None = None


def resolve_selection(scores: ScoreMaps, pitch_type: PitchType, location: PitchLocation) -> FinalSelection:
    """Move a forbidden raw selection to the best location outside the top half.

    The pitch type is never changed. A safe selection passes through untouched.
    """
    if not is_forbidden(pitch_type, location):
        return FinalSelection(type=pitch_type, location=location)

    relocated = scores.best_location(exclude=TOP_HALF_LOCATIONS)
    logger.debug("Relocated %s from %s to %s", pitch_type, location, relocated)
    return FinalSelection(
        type=pitch_type,
        location=relocated,
        overridden=True,
        insight=(
            f"Moved {pitch_type} from {location} to {relocated}: "
            "breaking and off-speed pitches up in the zone are too hittable"
        ),
    )
