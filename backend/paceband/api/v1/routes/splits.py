"""
Split Routes

Endpoints for split tables and distance units.
"""

from fastapi import APIRouter, HTTPException

from paceband.shared.constants import GOAL_TIME_PRESETS, STANDARD_DISTANCES, DistanceUnit
from paceband.features.splits import (
    RaceDistance,
    SplitRequest,
    SplitResponse,
    SplitRecordSchema,
    UnitSwitchRequest,
    UnitSwitchResponse,
    PresetsResponse,
    compute_splits,
    parse_goal_time,
    pace_per_unit,
    switch_unit,
)
from paceband.features.splits.schemas import StandardDistanceSchema

router = APIRouter()


@router.post("", response_model=SplitResponse)
async def get_splits(request: SplitRequest):
    """
    Compute cumulative split times for a goal.

    One row per whole km (or mile) plus the finish row,
    which always shows the goal time exactly.
    """
    try:
        splits = compute_splits(request.goal_time, request.distance, request.unit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if splits is None:
        raise HTTPException(
            status_code=422,
            detail=f"Cannot parse goal time: {request.goal_time!r} (expected H:MM:SS)"
        )

    goal = parse_goal_time(request.goal_time)
    return SplitResponse(
        goal_time=request.goal_time,
        distance=request.distance,
        unit=request.unit,
        pace_per_unit=round(pace_per_unit(goal, request.distance), 3),
        splits=[SplitRecordSchema(**s.to_dict()) for s in splits],
    )


@router.post("/switch-unit", response_model=UnitSwitchResponse)
async def switch_distance_unit(request: UnitSwitchRequest):
    """
    Re-express a standard distance in another unit.

    Only full and half marathon distances can be switched; they are
    looked up in the table rather than converted.
    """
    try:
        current = RaceDistance(request.distance, request.unit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    switched = switch_unit(current, request.new_unit)
    if switched is None:
        raise HTTPException(
            status_code=400,
            detail=f"{request.distance} {request.unit.value} is not a standard distance"
        )

    return UnitSwitchResponse(
        distance=switched.value,
        unit=switched.unit,
        standard=switched.standard,
    )


@router.get("/presets", response_model=PresetsResponse)
async def get_presets():
    """Goal time shortcuts and standard distances."""
    return PresetsResponse(
        goal_times=GOAL_TIME_PRESETS,
        distances=[
            StandardDistanceSchema(
                standard=standard,
                km=values[DistanceUnit.KM],
                mi=values[DistanceUnit.MI],
            )
            for standard, values in STANDARD_DISTANCES.items()
        ],
    )
