from collections.abc import Mapping
from datetime import date, datetime

from fastapi import APIRouter, Depends, Query

from rundash.agg import build_year
from rundash.app.dependencies import DashboardSnapshot, current_time, dashboard_snapshot
from rundash.app.models import CalendarMonthResponse
from rundash.models import DaySummary

router = APIRouter(prefix="/calendar", tags=["calendar"])


def build_calendar_response(
    year: int, day_index: Mapping[str, DaySummary], today: date
) -> list[CalendarMonthResponse]:
    return [
        CalendarMonthResponse.from_month(month, today)
        for month in build_year(year, day_index)
    ]


@router.get("", response_model=list[CalendarMonthResponse])
def get_calendar(
    year: int | None = Query(None, description="Defaults to the current year."),
    snapshot: DashboardSnapshot = Depends(dashboard_snapshot),
    now: datetime = Depends(current_time),
) -> list[CalendarMonthResponse]:
    """Get the twelve month grids of a year, annotated with activity days."""
    return build_calendar_response(
        year if year is not None else now.year, snapshot.day_index, now.date()
    )
