"""
Split table schemas.

Pydantic schemas for API request/response serialization.
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Union

from paceband.shared.constants import DistanceUnit, StandardDistance


class SplitRequest(BaseModel):
    """Request for a split table."""
    goal_time: str = Field(..., description="Goal finish time, H:MM:SS")
    distance: float = Field(default=42.195, gt=0)
    unit: DistanceUnit = DistanceUnit.KM


class SplitRecordSchema(BaseModel):
    """Single row of the band."""
    marker: Union[int, str]
    time: str


class SplitResponse(BaseModel):
    """Split table result."""
    goal_time: str
    distance: float
    unit: DistanceUnit
    pace_per_unit: float = Field(..., description="Seconds per km or mile")
    splits: List[SplitRecordSchema]


class UnitSwitchRequest(BaseModel):
    """Request to re-express a standard distance in another unit."""
    distance: float = Field(..., gt=0)
    unit: DistanceUnit
    new_unit: DistanceUnit


class UnitSwitchResponse(BaseModel):
    distance: float
    unit: DistanceUnit
    standard: Optional[StandardDistance] = None


class StandardDistanceSchema(BaseModel):
    standard: StandardDistance
    km: float
    mi: float


class PresetsResponse(BaseModel):
    """Goal time shortcuts and standard distances."""
    goal_times: List[str]
    distances: List[StandardDistanceSchema]
