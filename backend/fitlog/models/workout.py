"""
Workout domain models.

These are the shapes persisted as JSON in the storage slots:
- workouts: list of WorkoutRecord
- goals: GoalConfig, stored as {"time": ..., "calories": ...}
"""
from datetime import date as Date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WorkoutRecord(BaseModel):
    """A single logged workout. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Creation timestamp in epoch milliseconds")
    type: str = Field(..., description="Free-text exercise label")
    duration: int = Field(..., ge=0, description="Minutes")
    calories: int = Field(..., ge=0)
    date: Date = Field(..., description="Calendar day of the workout")

    def to_storage(self) -> dict:
        """Convert to the JSON-compatible storage shape."""
        return self.model_dump(mode="json")


class WorkoutDraft(BaseModel):
    """User input for a new workout, before an id is assigned."""

    type: str = Field(..., min_length=1, description="Exercise type")
    duration: int = Field(..., ge=0, description="Duration in minutes")
    calories: int = Field(..., ge=0, description="Calories burned")
    date: Optional[Date] = Field(None, description="Workout date, defaults to today")


class GoalConfig(BaseModel):
    """
    Weekly targets.

    A target of zero or None leaves the matching progress bar unrendered.
    """

    model_config = ConfigDict(populate_by_name=True)

    weekly_time_target: Optional[int] = Field(None, alias="time", description="Minutes per week")
    weekly_calorie_target: Optional[int] = Field(None, alias="calories", description="Calories per week")

    def to_storage(self) -> dict:
        """Convert to the JSON-compatible storage shape."""
        return self.model_dump(by_alias=True)
