"""Historical pitch dataset importers (JSON and CSV)."""

from pitch_advisor.ingest.historical_import import (
    import_historical_csv,
    import_historical_json,
    load_historical_file,
    records_from_dicts,
)

__all__ = ["import_historical_csv", "import_historical_json", "load_historical_file", "records_from_dicts"]
