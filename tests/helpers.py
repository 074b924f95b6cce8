from pitch_advisor.domain.historical import HistoricalPitch, Outcome, PitchMetadata, PitchSituation
from pitch_advisor.domain.pitch import Count, Handedness, Pitch, PitchLocation, PitchResult, PitchType


def make_pitch(
    pitch_type: PitchType = PitchType.FASTBALL,
    location: PitchLocation = PitchLocation.MIDDLE_MIDDLE,
    result: PitchResult = PitchResult.STRIKE,
    *,
    count_after: Count | None = None,
    count_before: Count | None = None,
    batter: Handedness | None = Handedness.RIGHT,
    pitcher: Handedness | None = Handedness.RIGHT,
    pitch_id: str = "p1",
) -> Pitch:
    return Pitch(
        id=pitch_id,
        type=pitch_type,
        location=location,
        result=result,
        timestamp=0.0,
        count_before=count_before,
        count_after=count_after,
        batter_handedness=batter,
        pitcher_handedness=pitcher,
    )


def make_record(
    pitch_type: PitchType = PitchType.FASTBALL,
    location: PitchLocation = PitchLocation.MIDDLE_MIDDLE,
    *,
    balls: int = 0,
    strikes: int = 0,
    batter: Handedness = Handedness.RIGHT,
    pitcher: Handedness = Handedness.RIGHT,
    success: bool = True,
    pitcher_name: str | None = None,
) -> HistoricalPitch:
    return HistoricalPitch(
        type=pitch_type,
        location=location,
        count=Count(balls, strikes),
        batter_handedness=batter,
        pitcher_handedness=pitcher,
        result=Outcome.SUCCESSFUL if success else Outcome.UNSUCCESSFUL,
        metadata=PitchMetadata(pitcher=pitcher_name) if pitcher_name else None,
    )


def make_situation(
    balls: int = 0,
    strikes: int = 0,
    batter: Handedness = Handedness.RIGHT,
    pitcher: Handedness = Handedness.RIGHT,
    previous: tuple[Pitch, ...] = (),
) -> PitchSituation:
    return PitchSituation(
        count=Count(balls, strikes),
        batter_handedness=batter,
        pitcher_handedness=pitcher,
        previous_pitches=previous,
    )
