import csv
import io
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class CsvSource:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def source_type(self) -> str:
        return "csv"

    @property
    def source_detail(self) -> str:
        return str(self._path)

    def fetch(self, **params: Any) -> list[dict[str, Any]]:
        logger.debug("Reading CSV %s", self._path)
        encoding = params.pop("encoding", "utf-8-sig")
        delimiter = params.pop("sep", params.pop("delimiter", ","))
        with open(self._path, encoding=encoding, newline="") as f:
            rows = read_csv_rows(f.read(), delimiter=delimiter)
        logger.debug("Read %d rows from %s", len(rows), self._path)
        return rows


def read_csv_rows(text: str, delimiter: str = ",") -> list[dict[str, Any]]:
    """Parse CSV text into row dicts with header names and values stripped of whitespace."""
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    try:
        header = [h.strip() for h in next(reader)]
    except StopIteration:
        return []
    rows: list[dict[str, Any]] = []
    for values in reader:
        if not any(v.strip() for v in values):
            continue
        rows.append({name: (values[i].strip() if i < len(values) else "") for i, name in enumerate(header)})
    return rows

