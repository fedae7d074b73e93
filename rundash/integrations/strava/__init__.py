from .client import StravaClient, StravaRequestError
from .models import (
    StravaActivity,
    StravaActivityTotals,
    StravaAthlete,
    StravaAthleteStats,
)

__all__ = [
    "StravaClient",
    "StravaRequestError",
    "StravaActivity",
    "StravaActivityTotals",
    "StravaAthlete",
    "StravaAthleteStats",
]
