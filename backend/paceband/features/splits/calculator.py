"""
Split Calculator

Turns a goal finish time and a race distance into cumulative split
times, one row per whole distance unit plus the finish.

Pure functions: no I/O, no clock, no shared state. Callers re-run
compute_splits on every configuration change and replace the whole
table with the result.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Union

from paceband.shared.constants import DistanceUnit
from paceband.shared.formatters import format_elapsed, format_marker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GoalTime:
    """Target finish time. Minutes/seconds are not range-checked."""
    hours: int
    minutes: int = 0
    seconds: int = 0

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds


@dataclass(frozen=True)
class SplitRecord:
    """One row of the pace band."""
    marker: Union[int, str]
    time: str

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {"marker": self.marker, "time": self.time}


def _parse_field(text: str) -> Optional[int]:
    text = text.strip()
    if not text.isdecimal():
        return None
    return int(text)


def parse_goal_time(text: str) -> Optional[GoalTime]:
    """
    Parse 'H:MM:SS' (or 'H:MM', or 'H') into a GoalTime.

    Fields are read left to right: hours, minutes, seconds.
    A missing or non-numeric minute/second field counts as 0.

    Returns:
        GoalTime, or None if the hours field is not a number
    """
    parts = text.split(":")
    hours = _parse_field(parts[0])
    if hours is None:
        return None

    minutes = _parse_field(parts[1]) if len(parts) > 1 else None
    seconds = _parse_field(parts[2]) if len(parts) > 2 else None
    return GoalTime(hours=hours, minutes=minutes or 0, seconds=seconds or 0)


def pace_per_unit(goal: GoalTime, distance: float) -> float:
    """Seconds per distance unit needed to hit the goal."""
    if distance <= 0:
        raise ValueError(f"Distance must be positive, got {distance}")
    return goal.total_seconds / distance


def compute_splits(
    goal_time_text: str,
    distance: float,
    unit: Union[DistanceUnit, str] = DistanceUnit.KM,
) -> Optional[List[SplitRecord]]:
    """
    Compute cumulative split times for a goal.

    Intermediate rows use the even pace truncated to whole seconds.
    The finish row always shows the goal time itself, so rounding
    never makes the last row disagree with what the runner typed.

    Args:
        goal_time_text: Goal time as typed, e.g. '03:00:00'
        distance: Race distance, must be > 0
        unit: 'km' or 'mi'

    Returns:
        List of SplitRecord (floor(distance) + 1 rows), or None when
        the goal time cannot be parsed (caller keeps its previous table)

    Raises:
        ValueError: If distance is not positive
    """
    unit = DistanceUnit(unit)
    if distance <= 0:
        raise ValueError(f"Distance must be positive, got {distance}")

    goal = parse_goal_time(goal_time_text)
    if goal is None:
        logger.debug(f"Ignoring unparsable goal time: {goal_time_text!r}")
        return None

    pace = pace_per_unit(goal, distance)

    splits = [
        SplitRecord(marker=i, time=format_elapsed(math.floor(pace * i)))
        for i in range(1, math.floor(distance) + 1)
    ]
    splits.append(
        SplitRecord(
            marker=format_marker(distance, unit),
            time=format_elapsed(goal.total_seconds),
        )
    )
    return splits


@dataclass
class SplitTable:
    """
    Holds the last good split table for a stateful caller.

    Usage:
        table = SplitTable()
        table.recalculate("03:00:00", 42.195, "km")
        table.recalculate("abc", 42.195, "km")  # keeps previous rows
    """
    records: List[SplitRecord] = field(default_factory=list)

    def recalculate(
        self,
        goal_time_text: str,
        distance: float,
        unit: Union[DistanceUnit, str] = DistanceUnit.KM,
    ) -> bool:
        """Replace records with a fresh table. Returns False on a no-op."""
        splits = compute_splits(goal_time_text, distance, unit)
        if splits is None:
            return False
        self.records = splits
        return True
