"""
Workout API endpoints.
"""
from datetime import date as Date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from fitlog.api.deps import get_tracker
from fitlog.models.workout import WorkoutDraft
from fitlog.services.ports import StaticConfirmation
from fitlog.services.presentation.views import Dashboard
from fitlog.services.tracker import TrackerSession

router = APIRouter()


# ========================================
# Request/Response Schemas
# ========================================

class CreateWorkoutRequest(BaseModel):
    """Request to log a new workout."""
    model_config = ConfigDict(str_strip_whitespace=True)

    type: str = Field(..., min_length=1, description="Exercise type")
    duration: int = Field(..., ge=0, description="Duration in minutes")
    calories: int = Field(..., ge=0, description="Calories burned")
    date: Optional[Date] = Field(None, description="Workout date, defaults to today")


class WorkoutResponse(BaseModel):
    """Workout record response."""
    id: int
    type: str
    duration: int
    calories: int
    date: Date


class CreateWorkoutResponse(BaseModel):
    workout: WorkoutResponse
    dashboard: Dashboard
    feedback: str = "Saved!"


class DeleteWorkoutResponse(BaseModel):
    deleted: bool
    dashboard: Dashboard


# ========================================
# API Endpoints
# ========================================

@router.get("", response_model=list[WorkoutResponse])
def list_workouts(
    tracker: TrackerSession = Depends(get_tracker),
):
    """
    Get all workouts in the order they were entered.
    """
    return [WorkoutResponse(**r.model_dump()) for r in tracker.records]


@router.post("", response_model=CreateWorkoutResponse)
def create_workout(
    request: CreateWorkoutRequest,
    tracker: TrackerSession = Depends(get_tracker),
):
    """
    Log a new workout and return the refreshed dashboard.
    """
    record = tracker.add_workout(
        WorkoutDraft(
            type=request.type,
            duration=request.duration,
            calories=request.calories,
            date=request.date,
        )
    )

    return CreateWorkoutResponse(
        workout=WorkoutResponse(**record.model_dump()),
        dashboard=tracker.render(trigger="add"),
    )


@router.delete("/{workout_id}", response_model=DeleteWorkoutResponse)
def delete_workout(
    workout_id: int,
    confirm: bool = Query(False, description="The user's answer to the delete prompt"),
    tracker: TrackerSession = Depends(get_tracker),
):
    """
    Delete a workout.

    Nothing is removed unless confirm is true. Unknown ids are not an error.
    """
    deleted = tracker.delete_workout(workout_id, StaticConfirmation(confirm))

    return DeleteWorkoutResponse(
        deleted=deleted,
        dashboard=tracker.render(trigger="delete"),
    )
