"""
Split time module.

Usage:
    from paceband.features.splits import compute_splits, SplitTable
    from paceband.features.splits import RaceDistance, switch_unit

Components:
- compute_splits: goal time + distance -> cumulative split rows
- SplitTable: keeps the last good table across malformed input
- switch_unit: km/mi switch via the standard distance table
"""

from .calculator import (
    GoalTime,
    SplitRecord,
    SplitTable,
    parse_goal_time,
    pace_per_unit,
    compute_splits,
)
from .distance import RaceDistance, match_standard_distance, switch_unit
from .schemas import (
    SplitRequest,
    SplitResponse,
    SplitRecordSchema,
    UnitSwitchRequest,
    UnitSwitchResponse,
    PresetsResponse,
)

__all__ = [
    # Calculator
    "GoalTime",
    "SplitRecord",
    "SplitTable",
    "parse_goal_time",
    "pace_per_unit",
    "compute_splits",
    # Distance
    "RaceDistance",
    "match_standard_distance",
    "switch_unit",
    # Schemas
    "SplitRequest",
    "SplitResponse",
    "SplitRecordSchema",
    "UnitSwitchRequest",
    "UnitSwitchResponse",
    "PresetsResponse",
]
