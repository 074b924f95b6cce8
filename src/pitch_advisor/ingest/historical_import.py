import json
import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, TypeVar

from pitch_advisor.domain.errors import IngestError
from pitch_advisor.domain.historical import HistoricalPitch
from pitch_advisor.domain.result import Err, Ok, Result
from pitch_advisor.ingest.column_maps import HistoricalImportError, detect_layout, make_historical_row_mapper
from pitch_advisor.ingest.csv_source import CsvSource, read_csv_rows
from pitch_advisor.ingest.protocols import DataSource

logger = logging.getLogger(__name__)

R = TypeVar("R")

_REQUIRED_JSON_FIELDS = ("type", "location", "count", "batterHandedness", "pitcherHandedness", "result")


def _map_rows(
    rows: Iterable[R], mapper: Callable[[R], HistoricalPitch | None], source_detail: str
) -> list[HistoricalPitch]:
    records: list[HistoricalPitch] = []
    skipped = 0
    for row in rows:
        record = mapper(row)
        if record is None:
            skipped += 1
            continue
        records.append(record)
    if skipped:
        logger.warning("Skipped %d malformed records from %s", skipped, source_detail)
    logger.debug("Imported %d historical records from %s", len(records), source_detail)
    return records


def _json_record(raw: Any) -> HistoricalPitch | None:
    if not isinstance(raw, dict) or not all(raw.get(key) for key in _REQUIRED_JSON_FIELDS):
        return None
    try:
        return HistoricalPitch.from_dict(raw)
    except (AttributeError, KeyError, TypeError, ValueError):
        logger.debug("Dropping record with invalid values: %r", raw)
        return None


def records_from_dicts(raw_records: Iterable[Any], source_detail: str = "memory") -> list[HistoricalPitch]:
    """Convert camelCase record dicts, dropping any that are incomplete or out of range."""
    return _map_rows(raw_records, _json_record, source_detail)


def import_historical_json(text: str, source_detail: str = "json") -> Result[list[HistoricalPitch], IngestError]:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(IngestError(message=f"Invalid JSON: {e}", source_type="json", source_detail=source_detail))
    if not isinstance(parsed, list):
        return Err(
            IngestError(
                message="Data must be an array of pitch records", source_type="json", source_detail=source_detail
            )
        )
    return Ok(records_from_dicts(parsed, source_detail))


def import_historical_rows(
    rows: list[dict[str, Any]], source_type: str, source_detail: str
) -> Result[list[HistoricalPitch], IngestError]:
    if not rows:
        return Err(
            IngestError(
                message="CSV file must have a header row and at least one data row",
                source_type=source_type,
                source_detail=source_detail,
            )
        )
    try:
        layout = detect_layout(list(rows[0].keys()))
    except HistoricalImportError as e:
        return Err(IngestError(message=str(e), source_type=source_type, source_detail=source_detail))
    logger.debug("Detected CSV layout %s", layout)
    return Ok(_map_rows(rows, make_historical_row_mapper(layout), source_detail))


def import_historical_csv(text: str, source_detail: str = "csv") -> Result[list[HistoricalPitch], IngestError]:
    return import_historical_rows(read_csv_rows(text), "csv", source_detail)


def import_from_source(source: DataSource) -> Result[list[HistoricalPitch], IngestError]:
    try:
        rows = source.fetch()
    except (OSError, UnicodeDecodeError) as e:
        return Err(IngestError(message=str(e), source_type=source.source_type, source_detail=source.source_detail))
    return import_historical_rows(rows, source.source_type, source.source_detail)


def load_historical_file(path: str | Path) -> Result[list[HistoricalPitch], IngestError]:
    """Load a historical dataset, choosing the JSON or CSV importer by file suffix."""
    path = Path(path)
    if path.suffix.lower() == ".json":
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            return Err(IngestError(message=str(e), source_type="json", source_detail=str(path)))
        return import_historical_json(text, str(path))
    return import_from_source(CsvSource(path))
