from .activity import Activity, DaySummary
from .training import TrainingWeek, WeekSpan, WeekGoal, Phase
from .calendar import CalendarDay, CalendarMonth
from .summary import YearToDateSummary, DashboardData

__all__ = [
    "Activity",
    "DaySummary",
    "TrainingWeek",
    "WeekSpan",
    "WeekGoal",
    "Phase",
    "CalendarDay",
    "CalendarMonth",
    "YearToDateSummary",
    "DashboardData",
]
