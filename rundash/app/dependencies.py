import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, time
from types import MappingProxyType

from fastapi import Depends, HTTPException

from rundash.agg import index_activity_days
from rundash.integrations.strava.client import StravaClient, StravaRequestError
from rundash.load.strava import load_dashboard_data
from rundash.models import DashboardData, DaySummary
from .constants import ACTIVITIES_START
from .env_loader import get_strava_access_token

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "Please add your Strava access token to .env"


@dataclass(frozen=True)
class DashboardSnapshot:
    """The fetched data plus the day index built from it.

    Loaded once per process; consumers only ever get read-only views.
    """

    data: DashboardData
    day_index: Mapping[str, DaySummary]

    @classmethod
    def from_data(cls, data: DashboardData) -> "DashboardSnapshot":
        day_index = MappingProxyType(index_activity_days(data.activities))
        return cls(data=data, day_index=day_index)


_snapshot: DashboardSnapshot | None = None
_snapshot_lock = threading.Lock()


def clear_dashboard_snapshot() -> None:
    """Forget the loaded snapshot so the next request fetches again."""
    global _snapshot
    _snapshot = None


def current_time() -> datetime:
    """The moment that current/future flags are computed against."""
    return datetime.now()


def strava_client() -> StravaClient:
    token = get_strava_access_token()
    if token is None:
        logger.error("Strava access token is not configured")
        raise HTTPException(status_code=503, detail=MISSING_TOKEN_MESSAGE)
    return StravaClient(access_token=token)


def dashboard_snapshot(
    client: StravaClient = Depends(strava_client),
    now: datetime = Depends(current_time),
) -> DashboardSnapshot:
    """Get the dashboard snapshot, fetching it from Strava on first use.

    Requests run in a threadpool, so the first fetch holds a lock and later
    callers wait for it instead of starting their own. A failed fetch is not
    remembered, so the next request tries again.
    """
    global _snapshot
    if _snapshot is not None:
        return _snapshot
    with _snapshot_lock:
        if _snapshot is None:
            try:
                data = load_dashboard_data(
                    client,
                    after=datetime.combine(ACTIVITIES_START, time.min),
                    before=now,
                )
            except StravaRequestError as e:
                raise HTTPException(status_code=502, detail=str(e)) from e
            _snapshot = DashboardSnapshot.from_data(data)
        return _snapshot
