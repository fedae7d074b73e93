from __future__ import annotations
from typing import TYPE_CHECKING, Self
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from rundash.utils.units import meters_to_miles

if TYPE_CHECKING:
    # This prevents circular imports at runtime.
    from rundash.integrations.strava.models import StravaActivity


class Activity(BaseModel):
    """One recorded exercise session, as reported by Strava."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    type: str  # Free-text activity type from Strava, e.g. "Run" or "Ride"
    distance: float = Field(ge=0)  # in meters
    moving_time: int  # in seconds
    start_date: datetime

    @property
    def date_key(self) -> str:
        """The literal calendar date of the start timestamp, as YYYY-MM-DD.

        No timezone conversion happens here: this is the date Strava reports.
        """
        return self.start_date.date().isoformat()

    @property
    def wall_clock_start(self) -> datetime:
        """The start timestamp as a naive datetime in the local timezone.

        Week bounds and `now` are naive local times, so this is what they are
        compared against.
        """
        return self.start_date.astimezone().replace(tzinfo=None)

    @property
    def distance_miles(self) -> float:
        return meters_to_miles(self.distance)

    @classmethod
    def from_strava(cls, strava_activity: StravaActivity) -> Self:
        """Create an Activity from a Strava API activity."""
        return cls(
            id=strava_activity.id,
            name=strava_activity.name,
            type=strava_activity.type,
            distance=strava_activity.distance,
            moving_time=strava_activity.moving_time,
            start_date=strava_activity.start_date,
        )


class DaySummary(BaseModel):
    """Activities recorded on a single calendar date."""

    date_key: str
    count: int = Field(ge=1)
    types: list[str]  # Distinct activity types, in first-seen order

    def describe(self) -> str:
        """Tooltip text for the calendar, e.g. '2 workouts: Run, Ride'."""
        plural = "s" if self.count > 1 else ""
        return f"{self.count} workout{plural}: {', '.join(self.types)}"
