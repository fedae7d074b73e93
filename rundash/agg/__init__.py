from .activity_days import index_activity_days
from .training_plan import (
    generate_weeks,
    week_goal,
    aggregate_week,
    build_training_plan,
    plan_totals,
    max_goal_miles,
    phase_sections,
)
from .calendar import build_month, build_year

__all__ = [
    "index_activity_days",
    "generate_weeks",
    "week_goal",
    "aggregate_week",
    "build_training_plan",
    "plan_totals",
    "max_goal_miles",
    "phase_sections",
    "build_month",
    "build_year",
]
