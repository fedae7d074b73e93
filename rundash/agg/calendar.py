import calendar
from collections.abc import Mapping

from rundash.models import CalendarDay, CalendarMonth, DaySummary
from rundash.models.training import MONTH_ABBREVIATIONS


def date_key(year: int, month: int, day: int) -> str:
    """Build the YYYY-MM-DD key for a 0-based month."""
    return f"{year:04d}-{month + 1:02d}-{day:02d}"


def build_month(
    year: int, month: int, day_index: Mapping[str, DaySummary]
) -> CalendarMonth:
    """
    Lay out one month as a flat, Sunday-first grid of day cells.

    The grid opens with one blank cell per weekday before the 1st (Sunday
    needs none, Saturday needs six), followed by a cell for every day of the
    month annotated with that day's activities, if any.

    Args:
        year: Calendar year.
        month: 0-based month, so January is 0 and December is 11.
        day_index: Activity summaries keyed by YYYY-MM-DD.
    """
    if not 0 <= month <= 11:
        raise ValueError(f"Month must be between 0 and 11, got {month}")

    # monthrange gives the weekday of the 1st with Monday as 0.
    first_weekday, days_in_month = calendar.monthrange(year, month + 1)
    leading_blanks = (first_weekday + 1) % 7

    days = [CalendarDay() for _ in range(leading_blanks)]
    for day in range(1, days_in_month + 1):
        key = date_key(year, month, day)
        days.append(
            CalendarDay(day_number=day, date_key=key, activity=day_index.get(key))
        )

    return CalendarMonth(
        year=year,
        month=month,
        name=MONTH_ABBREVIATIONS[month],
        leading_blanks=leading_blanks,
        days_in_month=days_in_month,
        days=days,
    )


def build_year(year: int, day_index: Mapping[str, DaySummary]) -> list[CalendarMonth]:
    """Build all twelve month grids of a year from one shared day index."""
    return [build_month(year, month, day_index) for month in range(12)]
