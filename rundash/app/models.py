from datetime import date, datetime
from typing import Self

from pydantic import BaseModel

from rundash.models import (
    Activity,
    CalendarDay,
    CalendarMonth,
    DaySummary,
    Phase,
    TrainingWeek,
    YearToDateSummary,
)


class TrainingWeekResponse(BaseModel):
    """A training week with the flags the dashboard renders it with."""

    week_number: int
    start_date: datetime
    end_date: datetime
    date_range_label: str
    phase: Phase
    show_phase_header: bool  # True for the first week of each phase
    goal_miles: int
    total_miles: float
    total_runs: int
    runs: list[Activity]
    is_current: bool
    is_future: bool
    hit_goal: bool
    progress_percent: float
    goal_bar_percent: float  # Goal relative to the plan's largest goal

    @classmethod
    def from_week(
        cls,
        week: TrainingWeek,
        now: datetime,
        max_goal_miles: int,
        show_phase_header: bool,
    ) -> Self:
        return cls(
            week_number=week.week_number,
            start_date=week.start_date,
            end_date=week.end_date,
            date_range_label=week.date_range_label(),
            phase=week.phase,
            show_phase_header=show_phase_header,
            goal_miles=week.goal_miles,
            total_miles=week.total_miles,
            total_runs=week.total_runs,
            runs=week.runs,
            is_current=week.is_current(now),
            is_future=week.is_future(now),
            hit_goal=week.hit_goal,
            progress_percent=week.progress_percent,
            goal_bar_percent=week.goal_miles / max_goal_miles * 100,
        )


class TrainingPlanResponse(BaseModel):
    """Response model for the training tracker."""

    title: str
    subtitle: str
    weeks: list[TrainingWeekResponse]
    total_miles: float
    total_runs: int
    max_goal_miles: int


class CalendarDayResponse(BaseModel):
    day_number: int | None
    date_key: str | None
    activity: DaySummary | None
    is_empty: bool  # Leading blank before the 1st of the month
    has_activity: bool
    is_today: bool
    is_future: bool
    title: str  # Hover text, empty when there was no activity

    @classmethod
    def from_day(cls, day: CalendarDay, today: date) -> Self:
        return cls(
            day_number=day.day_number,
            date_key=day.date_key,
            activity=day.activity,
            is_empty=day.is_empty,
            has_activity=day.has_activity,
            is_today=day.is_today(today),
            is_future=day.is_future(today),
            title=day.activity.describe() if day.activity is not None else "",
        )


class CalendarMonthResponse(BaseModel):
    year: int
    month: int
    name: str
    leading_blanks: int
    days_in_month: int
    days: list[CalendarDayResponse]

    @classmethod
    def from_month(cls, month: CalendarMonth, today: date) -> Self:
        return cls(
            year=month.year,
            month=month.month,
            name=month.name,
            leading_blanks=month.leading_blanks,
            days_in_month=month.days_in_month,
            days=[CalendarDayResponse.from_day(day, today) for day in month.days],
        )


class DashboardResponse(BaseModel):
    """Everything the dashboard page shows, in one response."""

    summary: YearToDateSummary
    training: TrainingPlanResponse
    calendar: list[CalendarMonthResponse]
