import logging
from collections.abc import Iterable

from pitch_advisor.domain.historical import HistoricalPitch

logger = logging.getLogger(__name__)


class InMemoryHistoricalPitchRepo:
    """Process-lifetime store of the uploaded historical dataset.

    The dataset is only ever replaced wholesale. There is no locking: callers
    must not replace the data while a recommendation is being computed on
    another thread.
    """

    def __init__(self, records: Iterable[HistoricalPitch] = ()) -> None:
        self._records: tuple[HistoricalPitch, ...] = tuple(records)

    def replace_all(self, records: Iterable[HistoricalPitch]) -> int:
        self._records = tuple(records)
        logger.info("Historical data replaced: %d records", len(self._records))
        return len(self._records)

    def all(self) -> tuple[HistoricalPitch, ...]:
        return self._records

    def count(self) -> int:
        return len(self._records)
