from collections.abc import Iterable
from typing import Protocol

from pitch_advisor.domain.historical import HistoricalPitch


class HistoricalPitchRepo(Protocol):
    def replace_all(self, records: Iterable[HistoricalPitch]) -> int: ...

    def all(self) -> tuple[HistoricalPitch, ...]: ...

    def count(self) -> int: ...
