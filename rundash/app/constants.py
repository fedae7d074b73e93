from datetime import date

"""Fixed dates for the dashboard.

The training window is one half marathon plan; the activity window bounds
what is fetched from Strava for the training tracker and the calendar.
"""

TRAINING_START = date(2025, 12, 1)
TRAINING_END = date(2026, 4, 30)

TRAINING_TITLE = "Half Marathon Training"
TRAINING_SUBTITLE = "Dec 2025 → Apr 2026"

ACTIVITIES_START = date(2025, 1, 1)
