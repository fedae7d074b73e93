from fastapi import APIRouter, Depends

from rundash.app.dependencies import DashboardSnapshot, dashboard_snapshot
from rundash.models import YearToDateSummary

router = APIRouter(prefix="/summary", tags=["summary"])


@router.get("", response_model=YearToDateSummary)
def get_summary(
    snapshot: DashboardSnapshot = Depends(dashboard_snapshot),
) -> YearToDateSummary:
    """Get the year-to-date running totals and the athlete's first name."""
    return snapshot.data.summary
