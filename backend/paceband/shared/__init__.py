"""
Shared utilities (NOT business logic).

Usage:
    from paceband.shared import DistanceUnit, format_elapsed
    from paceband.shared.constants import STANDARD_DISTANCES
"""
from .formatters import (
    format_elapsed,
    parse_elapsed,
    format_marker,
)
from .constants import (
    DistanceUnit,
    StandardDistance,
    STANDARD_DISTANCES,
    STANDARD_DISTANCE_TOLERANCE,
    GOAL_TIME_PRESETS,
)

__all__ = [
    # formatters
    "format_elapsed",
    "parse_elapsed",
    "format_marker",
    # constants
    "DistanceUnit",
    "StandardDistance",
    "STANDARD_DISTANCES",
    "STANDARD_DISTANCE_TOLERANCE",
    "GOAL_TIME_PRESETS",
]
