"""
Dashboard and Export API endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from fitlog.api.deps import get_tracker
from fitlog.core.errors import NothingToExportError
from fitlog.core.logging import get_logger
from fitlog.services.presentation.views import ChartPanel, Dashboard
from fitlog.services.tracker import TrackerSession

logger = get_logger(__name__)
router = APIRouter()


@router.get("/dashboard", response_model=Dashboard)
def get_dashboard(
    tracker: TrackerSession = Depends(get_tracker),
):
    """
    Get every dashboard panel, recomputed from the current records.
    """
    return tracker.render(trigger="load")


@router.get("/dashboard/charts", response_model=ChartPanel)
def get_charts(
    tracker: TrackerSession = Depends(get_tracker),
):
    """
    Get the Chart.js configurations for the activity and distribution charts.
    """
    return tracker.render(trigger="charts").charts


@router.get("/export/csv")
def export_workouts_to_csv(
    tracker: TrackerSession = Depends(get_tracker),
):
    """
    Export all workouts to a CSV download.
    """
    try:
        export = tracker.export()
    except NothingToExportError as e:
        logger.info("Export refused, no workouts")
        raise HTTPException(status_code=400, detail=e.message)

    return Response(
        content=export.content,
        media_type=export.content_type,
        headers={
            "Content-Disposition": f"attachment; filename={export.filename}"
        }
    )
