from collections.abc import Iterable

from rundash.models import Activity, DaySummary


def index_activity_days(activities: Iterable[Activity]) -> dict[str, DaySummary]:
    """
    Group activities by the calendar date they started on.

    The date key is the literal date Strava reports for the activity, with no
    timezone adjustment. Each summary counts the activities on that date and
    lists the distinct activity types seen, in first-seen order.
    """
    days: dict[str, DaySummary] = {}
    for activity in activities:
        key = activity.date_key
        summary = days.get(key)
        if summary is None:
            days[key] = DaySummary(date_key=key, count=1, types=[activity.type])
            continue
        summary.count += 1
        if activity.type not in summary.types:
            summary.types.append(activity.type)
    return days
