import pytest

from pitch_advisor.domain.pitch import TOP_HALF_LOCATIONS, PitchLocation, PitchType
from pitch_advisor.domain.scores import ScoreMaps
from pitch_advisor.services.safety_override import (
    FinalSelection,
    apply_top_half_penalty,
    is_forbidden,
    resolve_selection,
)

T = PitchType
L = PitchLocation


class TestIsForbidden:
    @pytest.mark.parametrize("pitch_type", [T.SLIDER, T.CHANGEUP])
    @pytest.mark.parametrize("location", sorted(TOP_HALF_LOCATIONS))
    def test_offspeed_up_is_forbidden(self, pitch_type: PitchType, location: PitchLocation) -> None:
        assert is_forbidden(pitch_type, location)

    def test_curveball_up_is_allowed(self) -> None:
        assert not is_forbidden(T.CURVEBALL, L.HIGH_MIDDLE)

    def test_slider_down_is_allowed(self) -> None:
        assert not is_forbidden(T.SLIDER, L.LOW_OUTSIDE)


class TestApplyTopHalfPenalty:
    def test_penalizes_top_half(self) -> None:
        scores = ScoreMaps.zeros()
        scores.type_scores[T.CHANGEUP] = 5
        scores.location_scores[L.HIGH_OUTSIDE] = 6
        scores.location_scores[L.LOW_MIDDLE] = 2
        assert apply_top_half_penalty(scores)
        assert scores.location_scores[L.HIGH_OUTSIDE] == -4
        assert scores.location_scores[L.WAY_HIGH] == -10
        assert scores.best_location() == L.LOW_MIDDLE

    def test_leaves_safe_leaders_alone(self) -> None:
        scores = ScoreMaps.zeros()
        scores.type_scores[T.FASTBALL] = 5
        scores.location_scores[L.HIGH_OUTSIDE] = 6
        assert not apply_top_half_penalty(scores)
        assert scores.location_scores[L.HIGH_OUTSIDE] == 6


class TestResolveSelection:
    def test_safe_selection_passes_through(self) -> None:
        scores = ScoreMaps.zeros()
        assert resolve_selection(scores, T.FASTBALL, L.HIGH_INSIDE) == FinalSelection(T.FASTBALL, L.HIGH_INSIDE)

    def test_relocates_to_best_lower_location(self) -> None:
        scores = ScoreMaps.zeros()
        scores.location_scores[L.HIGH_MIDDLE] = 9
        scores.location_scores[L.WAY_HIGH] = 8
        scores.location_scores[L.WAY_OUTSIDE] = 3
        selection = resolve_selection(scores, T.SLIDER, L.HIGH_MIDDLE)
        assert selection.type == T.SLIDER
        assert selection.location == L.WAY_OUTSIDE
        assert selection.overridden
        assert selection.insight == (
            "Moved Slider from High Middle to Way Outside: "
            "breaking and off-speed pitches up in the zone are too hittable"
        )
