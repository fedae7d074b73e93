from typing import Any, Optional
from dataclasses import dataclass
from datetime import datetime
import logging

import httpx
from pydantic import ValidationError

from .models import StravaActivity, StravaAthlete, StravaAthleteStats

logger = logging.getLogger(__name__)

BASE_URL = "https://www.strava.com/api/v3"
ATHLETE_URL = f"{BASE_URL}/athlete"
ATHLETES_URL = f"{BASE_URL}/athletes"
ACTIVITIES_URL = f"{BASE_URL}/athlete/activities"

ACTIVITIES_PER_PAGE = 200


class StravaRequestError(Exception):
    """A request to Strava failed and its data is unusable.

    The message is safe to show to users; the underlying cause is chained.
    """


@dataclass
class StravaClient:
    """Read-only client for the Strava API using a pre-obtained access token."""

    access_token: str
    per_page: int = ACTIVITIES_PER_PAGE

    def _auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
        }

    def _make_request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Make an authenticated API request.

        Transport errors propagate as `httpx.HTTPError`.
        """
        kwargs.setdefault("timeout", 10)

        with httpx.Client() as client:
            return client.request(method, url, headers=self._auth_headers(), **kwargs)

    def _get_json(self, url: str, failure_message: str) -> Any:
        """GET a resource, raising StravaRequestError on any failure."""
        try:
            response = self._make_request("GET", url)
        except httpx.HTTPError as e:
            logger.error(
                f"Request to {url} failed: exception_type={type(e).__name__}, error={e}"
            )
            raise StravaRequestError(failure_message) from e

        if response.status_code != 200:
            logger.error(
                f"Strava API returned error for {url}: {response.status_code} {response.text}"
            )
            raise StravaRequestError(failure_message)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Strava API returned invalid JSON for {url}: {e}")
            raise StravaRequestError(failure_message) from e

    def get_athlete(self) -> StravaAthlete:
        """Get the profile of the athlete who owns the access token."""
        payload = self._get_json(ATHLETE_URL, "Failed to fetch athlete data")
        try:
            return StravaAthlete.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Unexpected athlete payload from Strava: {e}")
            raise StravaRequestError("Failed to fetch athlete data") from e

    def get_athlete_stats(self, athlete_id: int) -> StravaAthleteStats:
        """Get the rolled-up activity totals for an athlete."""
        payload = self._get_json(
            f"{ATHLETES_URL}/{athlete_id}/stats", "Failed to fetch stats"
        )
        try:
            return StravaAthleteStats.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Unexpected stats payload from Strava: {e}")
            raise StravaRequestError("Failed to fetch stats") from e

    def get_activities(
        self, after: Optional[datetime] = None, before: Optional[datetime] = None
    ) -> list[StravaActivity]:
        """Get the activities from the Strava API.

        Records that fail validation (for example a missing or unparseable
        `start_date`) are skipped with a warning rather than failing the load.

        Args:
            after: Only return activities that started after this datetime.
            before: Only return activities that started before this datetime.
        """
        activities: list[StravaActivity] = []
        for raw in self._get_activities_raw(after=after, before=before):
            try:
                activities.append(StravaActivity.model_validate(raw))
            except ValidationError as e:
                activity_id = raw.get("id") if isinstance(raw, dict) else None
                logger.warning(
                    f"Skipping malformed Strava activity id={activity_id}: "
                    f"{e.error_count()} validation error(s)"
                )
        return activities

    def _get_activities_raw(
        self, after: Optional[datetime] = None, before: Optional[datetime] = None
    ) -> list[dict]:
        """Get the activity data from the Strava API.

        Pages are requested one at a time until a page comes back empty or
        shorter than the page size. If a page request fails, paging stops and
        the activities gathered so far are returned.
        """
        page = 1
        activities: list[dict] = []

        logger.info(f"Fetching activities from Strava API (page size: {self.per_page})")

        while True:
            params: dict[str, int] = {"page": page, "per_page": self.per_page}
            # Strava expects epoch timestamps (seconds since 1970-01-01)
            if after:
                params["after"] = int(after.timestamp())
            if before:
                params["before"] = int(before.timestamp())
            logger.debug(f"Requesting Strava activities page {page}: {params}")

            try:
                response = self._make_request(
                    "GET",
                    ACTIVITIES_URL,
                    params=params,
                    timeout=20,  # This request is often *extremely* slow
                )
            except httpx.HTTPError as e:
                logger.warning(
                    f"Stopping pagination at page {page} after request failure: "
                    f"exception_type={type(e).__name__}, error={e}; "
                    f"keeping {len(activities)} activities"
                )
                break

            if response.status_code != 200:
                logger.warning(
                    f"Stopping pagination at page {page}: Strava returned "
                    f"{response.status_code}; keeping {len(activities)} activities"
                )
                break

            try:
                payload: list[dict] = response.json()
            except ValueError as e:
                logger.warning(
                    f"Stopping pagination at page {page}: invalid JSON ({e}); "
                    f"keeping {len(activities)} activities"
                )
                break

            if not isinstance(payload, list):
                logger.warning(
                    f"Stopping pagination at page {page}: expected a list of "
                    f"activities; keeping {len(activities)} activities"
                )
                break

            logger.debug(f"Received {len(payload)} activities from page {page}")
            activities.extend(payload)

            if len(payload) < self.per_page:
                # An empty or short page means there is nothing more to fetch.
                break

            page += 1

        logger.info(
            f"Completed fetching activities: {len(activities)} total activities across {page} pages"
        )
        return activities
