import time
import uuid
from collections.abc import Callable

from pitch_advisor.domain.pitch import Count, Handedness, Pitch, PitchLocation, PitchResult, PitchType

_IN_PLAY_ENDINGS: dict[PitchResult, str] = {
    PitchResult.HIT: "Hit",
    PitchResult.OUT: "Out",
    PitchResult.HOME_RUN: "Home Run",
}


def next_count(count: Count, result: PitchResult) -> tuple[Count, str | None]:
    """Count after a pitch, and the at-bat result label when the pitch ends it.

    A foul only adds a strike below two strikes.
    """
    if result in _IN_PLAY_ENDINGS:
        return count, _IN_PLAY_ENDINGS[result]
    if result == PitchResult.BALL:
        after = Count(count.balls + 1, count.strikes)
        return after, "Walk" if after.balls >= 4 else None
    if result == PitchResult.STRIKE or (result == PitchResult.FOUL and count.strikes < 2):
        after = Count(count.balls, count.strikes + 1)
        return after, "Strikeout" if after.strikes >= 3 else None
    return count, None


class AtBatSession:
    """Ordered, append-only pitch log with the live count.

    Pitches are never edited or removed. After a terminal pitch the next
    at-bat starts from 0-0.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ) -> None:
        self._pitches: list[Pitch] = []
        self._count = Count(0, 0)
        self._at_bat_start = 0
        self._clock = clock
        self._id_factory = id_factory

    @property
    def count(self) -> Count:
        return self._count

    @property
    def pitches(self) -> tuple[Pitch, ...]:
        return tuple(self._pitches)

    def current_at_bat(self) -> tuple[Pitch, ...]:
        """Pitches of the at-bat in progress; empty right after an at-bat ends."""
        return tuple(self._pitches[self._at_bat_start :])

    def record_pitch(
        self,
        pitch_type: PitchType,
        location: PitchLocation,
        result: PitchResult,
        batter_handedness: Handedness = Handedness.RIGHT,
        pitcher_handedness: Handedness = Handedness.RIGHT,
    ) -> Pitch:
        before = self._count
        after, at_bat_result = next_count(before, result)
        pitch = Pitch(
            id=self._id_factory(),
            type=pitch_type,
            location=location,
            result=result,
            timestamp=self._clock(),
            count_before=before,
            count_after=after,
            at_bat_result=at_bat_result,
            batter_handedness=batter_handedness,
            pitcher_handedness=pitcher_handedness,
        )
        self._pitches.append(pitch)
        if at_bat_result is None:
            self._count = after
        else:
            self.reset_count()
        return pitch

    def reset_count(self) -> None:
        """Abandon the current at-bat and start the next one from 0-0."""
        self._count = Count(0, 0)
        self._at_bat_start = len(self._pitches)
