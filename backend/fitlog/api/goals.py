"""
Weekly Goals API endpoints.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from fitlog.api.deps import get_tracker
from fitlog.models.workout import GoalConfig
from fitlog.services.presentation.views import Dashboard, ProgressPanel
from fitlog.services.tracker import TrackerSession

router = APIRouter()


# ========================================
# Request/Response Schemas
# ========================================

class UpdateGoalsRequest(BaseModel):
    """Request to replace both weekly targets."""
    time: int = Field(..., gt=0, description="Weekly minutes target")
    calories: int = Field(..., gt=0, description="Weekly calories target")


class GoalsResponse(BaseModel):
    time: int | None
    calories: int | None


class UpdateGoalsResponse(BaseModel):
    goals: GoalsResponse
    progress: ProgressPanel
    dashboard: Dashboard
    feedback: str = "Goals updated"


def _goals_response(goals: GoalConfig) -> GoalsResponse:
    return GoalsResponse(**goals.to_storage())


# ========================================
# API Endpoints
# ========================================

@router.get("", response_model=GoalsResponse)
def get_goals(
    tracker: TrackerSession = Depends(get_tracker),
):
    """
    Get the current weekly targets.
    """
    return _goals_response(tracker.goals)


@router.put("", response_model=UpdateGoalsResponse)
def update_goals(
    request: UpdateGoalsRequest,
    tracker: TrackerSession = Depends(get_tracker),
):
    """
    Replace the weekly targets and return the refreshed progress.
    """
    goals = tracker.update_goals(
        GoalConfig(
            weekly_time_target=request.time,
            weekly_calorie_target=request.calories,
        )
    )
    dashboard = tracker.render(trigger="goals")

    return UpdateGoalsResponse(
        goals=_goals_response(goals),
        progress=dashboard.progress,
        dashboard=dashboard,
    )
