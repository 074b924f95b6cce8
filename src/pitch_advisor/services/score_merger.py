"""Blend rule-based and data-based scores, then perturb and promote variety.

The random perturbation is intentionally non-deterministic: it keeps the
recommender from cycling through the same suggestions. Pass a seeded
``random.Random`` to make a run reproducible.
"""

import logging
import random
from collections.abc import Mapping, Sequence
from typing import TypeVar

from pitch_advisor.domain.pitch import PitchLocation, PitchType
from pitch_advisor.domain.scores import ScoreMaps

logger = logging.getLogger(__name__)

K = TypeVar("K")

_default_rng = random.Random()


def blend_scores(rule: Mapping[K, float], data: Mapping[K, float], data_weight: float) -> dict[K, float]:
    rule_weight = 1 - data_weight
    return {key: rule[key] * rule_weight + data[key] * data_weight for key in rule}


def add_randomness(
    scores: Mapping[K, float],
    randomness: float = 0.15,
    rng: random.Random | None = None,
) -> dict[K, float]:
    """Nudge each score by up to ``randomness`` of its own magnitude, in either direction."""
    if randomness == 0:
        return dict(scores)
    rng = rng or _default_rng
    result: dict[K, float] = {}
    for key, score in scores.items():
        factor = rng.uniform(-1.0, 1.0)
        result[key] = score + abs(score) * randomness * factor
    return result


def promote_variety(scores: Mapping[K, float], recent: Sequence[K], boost: float = 1.5) -> dict[K, float]:
    """Boost options by how rarely they appear in ``recent``; the least used get the full boost."""
    result = dict(scores)
    if not recent:
        return result
    occurrences = {key: sum(1 for choice in recent if choice == key) for key in result}
    min_occurrences = min(occurrences.values())
    for key in result:
        ratio = (occurrences[key] - min_occurrences) / len(recent)
        result[key] += (1 - ratio) * boost
    return result


def merge_scores(
    rule_scores: ScoreMaps,
    data_scores: ScoreMaps,
    data_weight: float = 0.8,
    *,
    randomness: float = 0.15,
    recent_types: Sequence[PitchType] = (),
    recent_locations: Sequence[PitchLocation] = (),
    variety_boost: float = 1.5,
    rng: random.Random | None = None,
) -> ScoreMaps:
    """Interpolate the two score sets, then apply randomness and variety promotion.

    With ``randomness=0`` and no recent choices the result is the exact linear blend.
    """
    type_scores = blend_scores(rule_scores.type_scores, data_scores.type_scores, data_weight)
    location_scores = blend_scores(rule_scores.location_scores, data_scores.location_scores, data_weight)

    type_scores = add_randomness(type_scores, randomness, rng)
    location_scores = add_randomness(location_scores, randomness, rng)

    type_scores = promote_variety(type_scores, recent_types, variety_boost)
    location_scores = promote_variety(location_scores, recent_locations, variety_boost)

    logger.debug("Merged scores with data_weight=%.2f randomness=%.2f", data_weight, randomness)
    return ScoreMaps(type_scores=type_scores, location_scores=location_scores)
