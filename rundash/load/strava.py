import logging
from datetime import datetime
from typing import Optional

from rundash.integrations.strava.client import StravaClient
from rundash.models import Activity, DashboardData, YearToDateSummary
from rundash.utils.units import meters_to_miles

logger = logging.getLogger(__name__)


def load_dashboard_data(
    client: StravaClient,
    after: Optional[datetime] = None,
    before: Optional[datetime] = None,
) -> DashboardData:
    """Fetch everything the dashboard shows from Strava.

    The athlete profile and stats are required: if either request fails, the
    `StravaRequestError` propagates and nothing is returned. The activity
    listing is best-effort: an interrupted listing yields whatever pages were
    fetched before the failure.

    Args:
        client: The Strava API client.
        after: Only fetch activities that started after this datetime.
        before: Only fetch activities that started before this datetime.
    """
    logger.info("Starting Strava dashboard load")

    athlete = client.get_athlete()
    logger.info(f"Fetched Strava profile for athlete {athlete.id}")

    stats = client.get_athlete_stats(athlete.id)
    ytd = stats.ytd_run_totals
    summary = YearToDateSummary(
        miles_run=meters_to_miles(ytd.distance),
        total_runs=ytd.count,
        athlete_first_name=athlete.firstname,
    )

    strava_activities = client.get_activities(after=after, before=before)
    activities = [Activity.from_strava(a) for a in strava_activities]
    logger.info(
        f"Loaded {len(activities)} activities and year-to-date totals of "
        f"{summary.miles_run:.1f} miles over {summary.total_runs} runs"
    )
    return DashboardData(summary=summary, activities=activities)
