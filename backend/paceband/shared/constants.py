"""
Unified constants for distance units and standard race distances.

This module provides a single source of truth for the distance table
used by the split calculator, the unit switch and the band renderer.
"""

from enum import Enum


class DistanceUnit(str, Enum):
    """Unit a race distance is expressed in."""
    KM = "km"
    MI = "mi"


class StandardDistance(str, Enum):
    """
    Fixed race lengths recognised by the unit switch.

    Switching units on one of these re-selects the table value
    instead of converting the number.
    """
    FULL = "full"
    HALF = "half"


# Mapping: standard distance -> value per unit
STANDARD_DISTANCES: dict[StandardDistance, dict[DistanceUnit, float]] = {
    StandardDistance.FULL: {
        DistanceUnit.KM: 42.195,
        DistanceUnit.MI: 26.2188,
    },
    StandardDistance.HALF: {
        DistanceUnit.KM: 21.0975,
        DistanceUnit.MI: 13.1094,
    },
}

# Canonical labels for the finish marker of standard distances
STANDARD_DISTANCE_LABELS: dict[DistanceUnit, dict[float, str]] = {
    unit: {values[unit]: f"{values[unit]:.4f}".rstrip("0").rstrip(".")
           for values in STANDARD_DISTANCES.values()}
    for unit in DistanceUnit
}

# Band within which a distance counts as a standard one (in the current unit)
STANDARD_DISTANCE_TOLERANCE = 0.1

# Decimal places of a non-standard finish marker
MARKER_PRECISION: dict[DistanceUnit, int] = {
    DistanceUnit.KM: 3,
    DistanceUnit.MI: 2,
}

# Distances above this (in km) are labelled "Marathon" on the band
MARATHON_LABEL_THRESHOLD_KM = 30.0
KM_PER_MILE = 1.609344

# Goal time shortcuts offered by the UI
GOAL_TIME_PRESETS: list[str] = [
    "03:00:00",
    "03:30:00",
    "04:00:00",
    "04:30:00",
    "05:00:00",
]
