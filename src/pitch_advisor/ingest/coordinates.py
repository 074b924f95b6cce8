"""Map raw plate coordinates from pitch-tracking systems onto the 17 location zones.

Supported coordinate systems (feet unless noted):

- statcast: x -2.5..2.5 from plate center, z 0..5 from the ground
- trackman: x -1.5..1.5, z roughly 1.5..4 (also PlateLocSide/PlateLocHeight)
- hawkeye: x -1.25..1.25, z roughly 1.75..4
- normalized: both axes already 0..1
"""

from dataclasses import dataclass
from enum import StrEnum

from pitch_advisor.domain.pitch import Handedness, PitchLocation

L = PitchLocation


class CoordinateSystem(StrEnum):
    STATCAST = "statcast"
    TRACKMAN = "trackman"
    HAWKEYE = "hawkeye"
    NORMALIZED = "normalized"


@dataclass(frozen=True)
class PlateCoordinate:
    x: float  # 0 = inside edge, 1 = outside edge
    y: float  # 0 = bottom, 1 = top


_BOUNDARIES = (0.2, 0.4, 0.6, 0.8, 1.0)

# (row, column) on a 5x5 grid, row 0 at the bottom and column 0 inside.
_ZONES: dict[tuple[int, int], PitchLocation] = {
    (1, 1): L.LOW_INSIDE,
    (1, 2): L.LOW_MIDDLE,
    (1, 3): L.LOW_OUTSIDE,
    (2, 1): L.MIDDLE_INSIDE,
    (2, 2): L.MIDDLE_MIDDLE,
    (2, 3): L.MIDDLE_OUTSIDE,
    (3, 1): L.HIGH_INSIDE,
    (3, 2): L.HIGH_MIDDLE,
    (3, 3): L.HIGH_OUTSIDE,
    (0, 0): L.WAY_LOW_INSIDE,
    (0, 1): L.WAY_LOW_INSIDE,
    (0, 2): L.WAY_LOW,
    (0, 3): L.WAY_LOW,
    (0, 4): L.WAY_LOW_OUTSIDE,
    (1, 0): L.WAY_LOW_INSIDE,
    (1, 4): L.WAY_LOW_OUTSIDE,
    (2, 0): L.WAY_INSIDE,
    (2, 4): L.WAY_OUTSIDE,
    (3, 0): L.WAY_HIGH_INSIDE,
    (3, 4): L.WAY_HIGH_OUTSIDE,
    (4, 0): L.WAY_HIGH_INSIDE,
    (4, 1): L.WAY_HIGH_INSIDE,
    (4, 2): L.WAY_HIGH,
    (4, 3): L.WAY_HIGH,
    (4, 4): L.WAY_HIGH_OUTSIDE,
}


def normalize_coordinates(
    x: float, z: float, system: CoordinateSystem = CoordinateSystem.STATCAST
) -> PlateCoordinate:
    match system:
        case CoordinateSystem.STATCAST:
            return PlateCoordinate(x=(x + 2.5) / 5, y=z / 5)
        case CoordinateSystem.TRACKMAN:
            return PlateCoordinate(x=(x + 1.5) / 3, y=(z - 1.5) / 2.5)
        case CoordinateSystem.HAWKEYE:
            return PlateCoordinate(x=(x + 1.25) / 2.5, y=(z - 1.75) / 2.25)
        case _:
            return PlateCoordinate(x=x, y=z)


def adjust_for_batter(coord: PlateCoordinate, batter_handedness: Handedness) -> PlateCoordinate:
    """Flip inside/outside for left-handed batters."""
    if batter_handedness == Handedness.LEFT:
        return PlateCoordinate(x=1 - coord.x, y=coord.y)
    return coord


def _bucket(value: float) -> int:
    for index, upper in enumerate(_BOUNDARIES):
        if value <= upper:
            return index
    return len(_BOUNDARIES) - 1


def coordinate_to_zone(coord: PlateCoordinate) -> PitchLocation:
    return _ZONES.get((_bucket(coord.y), _bucket(coord.x)), L.MIDDLE_MIDDLE)


def coordinates_to_location(
    x: float,
    z: float,
    batter_handedness: Handedness = Handedness.RIGHT,
    system: CoordinateSystem = CoordinateSystem.STATCAST,
) -> PitchLocation:
    normalized = normalize_coordinates(x, z, system)
    return coordinate_to_zone(adjust_for_batter(normalized, batter_handedness))
