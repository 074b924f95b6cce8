import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from pitch_advisor.domain.historical import HistoricalPitch, Outcome, PitchMetadata
from pitch_advisor.domain.pitch import Count, Handedness, PitchLocation, PitchType
from pitch_advisor.exceptions import PitchAdvisorException
from pitch_advisor.ingest.coordinates import CoordinateSystem, coordinates_to_location

logger = logging.getLogger(__name__)

T = PitchType
L = PitchLocation


class HistoricalImportError(PitchAdvisorException):
    """Raised when an uploaded dataset cannot be interpreted at all."""


PITCH_TYPE_NAMES: dict[str, PitchType] = {
    **{t.value: t for t in PitchType},
    "4-Seam Fastball": T.FASTBALL,
    "FourSeamFastBall": T.FASTBALL,
    "2-Seam Fastball": T.SINKER,
    "TwoSeamFastBall": T.SINKER,
    "ChangeUp": T.CHANGEUP,
}

LOCATION_LABELS: dict[str, PitchLocation] = {
    **{loc.value: loc for loc in PitchLocation},
    "High & Inside": L.HIGH_INSIDE,
    "High & Middle": L.HIGH_MIDDLE,
    "High & Outside": L.HIGH_OUTSIDE,
    "Middle & Inside": L.MIDDLE_INSIDE,
    "Middle": L.MIDDLE_MIDDLE,
    "Middle & Outside": L.MIDDLE_OUTSIDE,
    "Low & Inside": L.LOW_INSIDE,
    "Low & Middle": L.LOW_MIDDLE,
    "Low & Outside": L.LOW_OUTSIDE,
    "Way High & Inside": L.WAY_HIGH_INSIDE,
    "Way High & Outside": L.WAY_HIGH_OUTSIDE,
    "Way Low & Inside": L.WAY_LOW_INSIDE,
    "Way Low & Outside": L.WAY_LOW_OUTSIDE,
}

RESULT_OUTCOMES: dict[str, Outcome] = {
    "Strike": Outcome.SUCCESSFUL,
    "Swinging Strike": Outcome.SUCCESSFUL,
    "Called Strike": Outcome.SUCCESSFUL,
    "Foul": Outcome.SUCCESSFUL,
    "In Play - Out": Outcome.SUCCESSFUL,
    "Ball": Outcome.UNSUCCESSFUL,
    "Hit By Pitch": Outcome.UNSUCCESSFUL,
    "In Play - Hit": Outcome.UNSUCCESSFUL,
    "In Play - HR": Outcome.UNSUCCESSFUL,
}

PITCH_CALL_OUTCOMES: dict[str, Outcome] = {
    "StrikeCalled": Outcome.SUCCESSFUL,
    "StrikeSwinging": Outcome.SUCCESSFUL,
    "FoulBall": Outcome.SUCCESSFUL,
    "InPlay": Outcome.SUCCESSFUL,
    "Ball": Outcome.UNSUCCESSFUL,
    "BallHBP": Outcome.UNSUCCESSFUL,
    "InPlayHit": Outcome.UNSUCCESSFUL,
    "InPlayHomeRun": Outcome.UNSUCCESSFUL,
    "BallinDirt": Outcome.UNSUCCESSFUL,
}

_HANDEDNESS: dict[str, Handedness] = {
    "R": Handedness.RIGHT,
    "Right": Handedness.RIGHT,
    "L": Handedness.LEFT,
    "Left": Handedness.LEFT,
}

_HORIZONTAL_COLUMNS = ("PlateX", "plate_x", "PlateLocSide", "px")
_VERTICAL_COLUMNS = ("PlateZ", "plate_z", "PlateLocHeight", "pz")


def _first_present(header: Sequence[str], candidates: Sequence[str]) -> str | None:
    return next((c for c in candidates if c in header), None)


@dataclass(frozen=True)
class CsvLayout:
    """Which columns of an uploaded CSV carry each field."""

    pitch_type_column: str
    batter_column: str
    pitcher_column: str
    result_column: str
    result_outcomes: dict[str, Outcome]
    count_column: str | None = None
    location_column: str | None = None
    horizontal_column: str | None = None
    vertical_column: str | None = None
    coordinate_system: CoordinateSystem = CoordinateSystem.STATCAST


def detect_layout(header: Sequence[str]) -> CsvLayout:
    """Validate a CSV header and work out its column layout.

    Raises:
        HistoricalImportError: A required column (or any of its alternatives) is missing.
    """
    if not header:
        raise HistoricalImportError("CSV file must have a header row")
    if "Date" not in header:
        raise HistoricalImportError("Missing required columns: Date")

    has_count = "Count" in header
    if not has_count and not ("Balls" in header and "Strikes" in header):
        raise HistoricalImportError(
            'Missing required column: Either "Count" or both "Balls" and "Strikes" must be present'
        )

    pitch_type_column = _first_present(header, ("Pitch Type", "TaggedPitchType"))
    if pitch_type_column is None:
        raise HistoricalImportError('Missing required column: Either "Pitch Type" or "TaggedPitchType" must be present')

    batter_column = _first_present(header, ("Batter Stands", "BatterSide"))
    if batter_column is None:
        raise HistoricalImportError('Missing required column: Either "Batter Stands" or "BatterSide" must be present')

    pitcher_column = _first_present(header, ("Pitcher Throws", "PitcherThrows"))
    if pitcher_column is None:
        raise HistoricalImportError(
            'Missing required column: Either "Pitcher Throws" or "PitcherThrows" must be present'
        )

    if "Result" in header:
        result_column, result_outcomes = "Result", RESULT_OUTCOMES
    elif "PitchCall" in header:
        result_column, result_outcomes = "PitchCall", PITCH_CALL_OUTCOMES
    else:
        raise HistoricalImportError('Missing required column: Either "Result" or "PitchCall" must be present')

    location_column = "Location" if "Location" in header else None
    horizontal = _first_present(header, _HORIZONTAL_COLUMNS)
    vertical = _first_present(header, _VERTICAL_COLUMNS)
    has_coordinates = horizontal is not None and vertical is not None
    if location_column is None and not has_coordinates:
        raise HistoricalImportError(
            'Missing required column: Either "Location" or coordinate columns '
            "(PlateX/plate_x/px/PlateLocSide and PlateZ/plate_z/pz/PlateLocHeight) must be present"
        )

    system = CoordinateSystem.STATCAST
    if has_coordinates:
        if {"TaggedPitchType", "SpinRate", "PlateLocSide", "PlateLocHeight"} & set(header):
            system = CoordinateSystem.TRACKMAN
        elif {"Extension", "RelHeight"} & set(header):
            system = CoordinateSystem.HAWKEYE

    return CsvLayout(
        pitch_type_column=pitch_type_column,
        batter_column=batter_column,
        pitcher_column=pitcher_column,
        result_column=result_column,
        result_outcomes=result_outcomes,
        count_column="Count" if has_count else None,
        location_column=location_column,
        horizontal_column=horizontal if has_coordinates else None,
        vertical_column=vertical if has_coordinates else None,
        coordinate_system=system,
    )


def _to_optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def _to_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    s = str(value).strip()
    if s == "":
        return None
    return s


def _parse_count(row: dict[str, Any], layout: CsvLayout) -> Count | None:
    try:
        if layout.count_column is not None:
            balls, strikes = (int(part) for part in str(row.get(layout.count_column, "")).split("-"))
        else:
            balls, strikes = int(row.get("Balls", "")), int(row.get("Strikes", ""))
    except (TypeError, ValueError):
        return None
    return Count(balls, strikes)


def make_historical_row_mapper(layout: CsvLayout) -> Callable[[dict[str, Any]], HistoricalPitch | None]:
    """Build a row mapper for ``layout``; the mapper returns None for unusable rows."""

    def mapper(row: dict[str, Any]) -> HistoricalPitch | None:
        pitch_type = PITCH_TYPE_NAMES.get(str(row.get(layout.pitch_type_column, "")))
        batter = _HANDEDNESS.get(str(row.get(layout.batter_column, "")))
        pitcher = _HANDEDNESS.get(str(row.get(layout.pitcher_column, "")))
        count = _parse_count(row, layout)
        if pitch_type is None or batter is None or pitcher is None or count is None:
            return None

        plate_x = _to_optional_float(row.get(layout.horizontal_column)) if layout.horizontal_column else None
        plate_z = _to_optional_float(row.get(layout.vertical_column)) if layout.vertical_column else None

        location: PitchLocation | None = None
        if layout.location_column is not None:
            location = LOCATION_LABELS.get(str(row.get(layout.location_column, "")))
        if location is None and plate_x is not None and plate_z is not None:
            location = coordinates_to_location(plate_x, plate_z, batter, layout.coordinate_system)
        if location is None:
            return None

        outcome = layout.result_outcomes.get(str(row.get(layout.result_column, "")), Outcome.UNSUCCESSFUL)

        return HistoricalPitch(
            type=pitch_type,
            location=location,
            count=count,
            batter_handedness=batter,
            pitcher_handedness=pitcher,
            result=outcome,
            metadata=PitchMetadata(
                date=_to_optional_str(row.get("Date")),
                pitcher=_to_optional_str(row.get("Pitcher")),
                velocity=_to_optional_float(row.get("Pitch Velocity")),
                spin_rate=_to_optional_float(row.get("Spin Rate")),
                horizontal_break=_to_optional_float(row.get("Horizontal Break")),
                vertical_break=_to_optional_float(row.get("Vertical Break")),
                plate_x=plate_x,
                plate_z=plate_z,
            ),
        )

    return mapper
