from datetime import datetime

from pydantic import BaseModel, Field


class StravaAthlete(BaseModel):
    """The authenticated athlete's profile."""

    id: int
    firstname: str
    lastname: str | None = None


class StravaActivityTotals(BaseModel):
    count: int
    distance: float  # in meters


class StravaAthleteStats(BaseModel):
    """Rolled-up totals for an athlete. Only the year-to-date runs are used."""

    ytd_run_totals: StravaActivityTotals


class StravaActivity(BaseModel):
    """An activity pulled from the Strava activity listing.

    Strava returns many more fields; only the ones the dashboard reads are
    declared here and the rest are ignored.
    """

    id: int
    name: str
    type: str
    start_date: datetime
    distance: float = Field(ge=0)
    moving_time: int
