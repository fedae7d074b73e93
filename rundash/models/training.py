from datetime import datetime
from typing import Literal, NamedTuple

from pydantic import BaseModel, Field

from .activity import Activity

Phase = Literal["Base Building", "Ramp Up", "Building", "Peak", "Taper", "Race Week"]

MONTH_ABBREVIATIONS = "Jan Feb Mar Apr May Jun Jul Aug Sep Oct Nov Dec".split()


class WeekGoal(NamedTuple):
    goal_miles: int
    phase: Phase


class WeekSpan(BaseModel):
    """One Monday-to-Sunday week of the training plan."""

    week_number: int = Field(ge=1)
    start_date: datetime  # Monday at midnight
    end_date: datetime  # Sunday at 23:59:59.999, inclusive

    def contains(self, moment: datetime) -> bool:
        return self.start_date <= moment <= self.end_date

    def date_range_label(self) -> str:
        """Short label for the week, e.g. 'Dec 29 - Jan 4'."""
        start_month = MONTH_ABBREVIATIONS[self.start_date.month - 1]
        end_month = MONTH_ABBREVIATIONS[self.end_date.month - 1]
        return (
            f"{start_month} {self.start_date.day} - {end_month} {self.end_date.day}"
        )


class TrainingWeek(WeekSpan):
    """A week of the plan with the runs logged in it and its goal.

    The current/future flags depend on the moment they are asked about, so they
    are methods taking `now` rather than stored fields.
    """

    runs: list[Activity]
    total_miles: float
    total_runs: int
    goal_miles: int
    phase: Phase

    @property
    def hit_goal(self) -> bool:
        return self.total_miles >= self.goal_miles

    @property
    def progress_percent(self) -> float:
        """Share of the weekly goal completed, capped at 100."""
        return min(self.total_miles / self.goal_miles * 100, 100.0)

    def is_current(self, now: datetime) -> bool:
        return self.contains(now)

    def is_future(self, now: datetime) -> bool:
        return self.start_date > now
