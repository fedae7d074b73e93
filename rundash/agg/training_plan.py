from collections.abc import Iterable, Sequence
from datetime import date, datetime, time, timedelta
from itertools import groupby

from rundash.models import Activity, TrainingWeek, WeekGoal, WeekSpan, Phase
from rundash.utils.units import meters_to_miles

RUN_TYPE = "Run"
END_OF_DAY = time(23, 59, 59, 999000)


def week_start_for(day: date) -> date:
    """Return the Monday on or before `day`."""
    return day - timedelta(days=day.weekday())


def generate_weeks(training_start: date, training_end: date) -> list[WeekSpan]:
    """
    Enumerate the Monday-aligned weeks covering a training window.

    The first week is the one containing `training_start`. Weeks are emitted
    until a week would start after `training_end`, so the last week may run
    past the end of the window.

    Args:
        training_start: First day of the training window.
        training_end: Last day of the training window.
    """
    weeks: list[WeekSpan] = []
    week_start = week_start_for(training_start)
    week_number = 1
    while week_start <= training_end:
        week_end = week_start + timedelta(days=6)
        weeks.append(
            WeekSpan(
                week_number=week_number,
                start_date=datetime.combine(week_start, time.min),
                end_date=datetime.combine(week_end, END_OF_DAY),
            )
        )
        week_number += 1
        week_start += timedelta(days=7)
    return weeks


def week_goal(week_number: int) -> WeekGoal:
    """
    Return the target mileage and training phase for a 1-based week number.

    Base building ramps 10-13mi over weeks 1-4, then 14-17mi (weeks 5-8),
    18-22mi (weeks 9-13) and a 22-25mi peak (weeks 14-17). From week 18 the
    goal drops 4mi a week, floored at 10mi, with the third taper week onwards
    labelled as race week.
    """
    if week_number < 1:
        raise ValueError(f"Week numbers start at 1, got {week_number}")

    if week_number <= 4:
        return WeekGoal(10 + (week_number - 1), "Base Building")
    elif week_number <= 8:
        return WeekGoal(14 + (week_number - 5), "Ramp Up")
    elif week_number <= 13:
        return WeekGoal(18 + (week_number - 9), "Building")
    elif week_number <= 17:
        return WeekGoal(22 + (week_number - 14), "Peak")
    taper_week = week_number - 17
    phase: Phase = "Race Week" if taper_week >= 3 else "Taper"
    return WeekGoal(max(10, 25 - 4 * taper_week), phase)


def aggregate_week(week: WeekSpan, activities: Iterable[Activity]) -> TrainingWeek:
    """
    Collect the runs that fall inside a week and compare them with its goal.

    Only activities of type "Run" count. Start timestamps are compared in full
    against the week bounds, both of which are inclusive.
    """
    runs = [
        activity
        for activity in activities
        if activity.type == RUN_TYPE and week.contains(activity.wall_clock_start)
    ]
    goal = week_goal(week.week_number)
    # Round so that floating point error in the conversion doesn't leave a
    # week a hair short of its goal.
    total_miles = round(sum(meters_to_miles(run.distance) for run in runs), 4)
    return TrainingWeek(
        week_number=week.week_number,
        start_date=week.start_date,
        end_date=week.end_date,
        runs=runs,
        total_miles=total_miles,
        total_runs=len(runs),
        goal_miles=goal.goal_miles,
        phase=goal.phase,
    )


def build_training_plan(
    activities: Sequence[Activity], training_start: date, training_end: date
) -> list[TrainingWeek]:
    """Aggregate activities into every week of the training window."""
    return [
        aggregate_week(week, activities)
        for week in generate_weeks(training_start, training_end)
    ]


def plan_totals(weeks: Iterable[TrainingWeek]) -> tuple[float, int]:
    """Return (total miles, total runs) across all weeks of the plan."""
    total_miles = 0.0
    total_runs = 0
    for week in weeks:
        total_miles += week.total_miles
        total_runs += week.total_runs
    return round(total_miles, 4), total_runs


def max_goal_miles(weeks: Iterable[TrainingWeek]) -> int:
    """The largest weekly goal in the plan, or 0 for an empty plan."""
    return max((week.goal_miles for week in weeks), default=0)


def phase_sections(
    weeks: Iterable[TrainingWeek],
) -> list[tuple[Phase, list[TrainingWeek]]]:
    """Group consecutive weeks that share a phase, preserving week order."""
    return [(phase, list(group)) for phase, group in groupby(weeks, lambda w: w.phase)]
