from datetime import date

from pydantic import BaseModel, Field

from .activity import DaySummary


class CalendarDay(BaseModel):
    """One cell of a month grid.

    Leading blank cells have no day number, date key or activity.
    """

    day_number: int | None = None
    date_key: str | None = None
    activity: DaySummary | None = None

    @property
    def is_empty(self) -> bool:
        return self.day_number is None

    @property
    def has_activity(self) -> bool:
        return self.activity is not None

    def is_today(self, today: date) -> bool:
        return self.date_key == today.isoformat()

    def is_future(self, today: date) -> bool:
        # ISO date strings sort chronologically.
        return self.date_key is not None and self.date_key > today.isoformat()


class CalendarMonth(BaseModel):
    year: int
    month: int = Field(ge=0, le=11)  # 0-based, January is 0
    name: str
    leading_blanks: int = Field(ge=0, le=6)
    days_in_month: int
    days: list[CalendarDay]
