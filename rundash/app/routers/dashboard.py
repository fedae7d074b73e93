from datetime import datetime

from fastapi import APIRouter, Depends

from rundash.app.dependencies import DashboardSnapshot, current_time, dashboard_snapshot
from rundash.app.models import DashboardResponse
from .calendar import build_calendar_response
from .training import build_training_response

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    snapshot: DashboardSnapshot = Depends(dashboard_snapshot),
    now: datetime = Depends(current_time),
) -> DashboardResponse:
    """Get the summary card, training tracker and calendar for the current year."""
    return DashboardResponse(
        summary=snapshot.data.summary,
        training=build_training_response(snapshot.data.activities, now),
        calendar=build_calendar_response(now.year, snapshot.day_index, now.date()),
    )
