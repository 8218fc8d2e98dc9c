"""Race distance and the km/mi switch for standard distances."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from paceband.shared.constants import (
    DistanceUnit,
    StandardDistance,
    STANDARD_DISTANCES,
    STANDARD_DISTANCE_TOLERANCE,
    MARATHON_LABEL_THRESHOLD_KM,
    KM_PER_MILE,
)


@dataclass(frozen=True)
class RaceDistance:
    """A positive distance tagged with its unit."""

    value: float
    unit: DistanceUnit = DistanceUnit.KM

    def __post_init__(self):
        if self.value <= 0:
            raise ValueError(f"Distance must be positive, got {self.value}")
        object.__setattr__(self, "unit", DistanceUnit(self.unit))

    @property
    def standard(self) -> Optional[StandardDistance]:
        return match_standard_distance(self.value, self.unit)

    @property
    def is_marathon(self) -> bool:
        """True for anything long enough to be labelled a marathon."""
        km = self.value if self.unit == DistanceUnit.KM else self.value * KM_PER_MILE
        return km > MARATHON_LABEL_THRESHOLD_KM

    @classmethod
    def from_standard(
        cls, standard: StandardDistance, unit: Union[DistanceUnit, str]
    ) -> "RaceDistance":
        unit = DistanceUnit(unit)
        return cls(STANDARD_DISTANCES[standard][unit], unit)


def match_standard_distance(
    distance: float, unit: Union[DistanceUnit, str]
) -> Optional[StandardDistance]:
    """
    Find the standard distance within tolerance of a value.

    The comparison is made in the value's own unit, so 42.1 km
    matches the full marathon but 42.1 mi matches nothing.
    """
    unit = DistanceUnit(unit)
    for standard, values in STANDARD_DISTANCES.items():
        if abs(distance - values[unit]) <= STANDARD_DISTANCE_TOLERANCE:
            return standard
    return None


def switch_unit(
    distance: RaceDistance, new_unit: Union[DistanceUnit, str]
) -> Optional[RaceDistance]:
    """
    Re-express a distance in another unit.

    Standard distances are looked up in the table rather than
    converted, so toggling km/mi repeatedly never drifts.

    Returns:
        RaceDistance in new_unit, or None when the distance is not a
        standard one (what to do then is up to the caller)
    """
    new_unit = DistanceUnit(new_unit)
    if new_unit == distance.unit:
        return distance

    standard = distance.standard
    if standard is None:
        return None
    return RaceDistance.from_standard(standard, new_unit)
