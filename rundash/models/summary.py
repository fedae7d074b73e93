from pydantic import BaseModel

from .activity import Activity


class YearToDateSummary(BaseModel):
    """The headline numbers of the dashboard card."""

    miles_run: float
    total_runs: int
    athlete_first_name: str


class DashboardData(BaseModel):
    """Everything fetched from Strava for one dashboard load."""

    summary: YearToDateSummary
    activities: list[Activity]
