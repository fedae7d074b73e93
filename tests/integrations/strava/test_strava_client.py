from datetime import datetime, timezone
from unittest.mock import MagicMock, Mock, patch

import httpx
import pytest

from rundash.integrations.strava.client import (
    ACTIVITIES_URL,
    ATHLETE_URL,
    StravaClient,
    StravaRequestError,
)


def _response(status_code: int = 200, payload=None) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = "" if payload is None else str(payload)
    return response


def test_make_request_sends_bearer_token():
    client = StravaClient(access_token="secret_token")

    with patch("httpx.Client") as mock_client:
        mock_client_instance = MagicMock()
        mock_client.return_value.__enter__.return_value = mock_client_instance
        mock_client_instance.request.return_value = _response(200, {})

        response = client._make_request("GET", ATHLETE_URL)

    assert response.status_code == 200
    mock_client_instance.request.assert_called_once()
    _, kwargs = mock_client_instance.request.call_args
    assert kwargs["headers"] == {"Authorization": "Bearer secret_token"}
    assert kwargs["timeout"] == 10


def test_get_athlete():
    client = StravaClient(access_token="token")
    payload = {"id": 7, "firstname": "Sam", "lastname": "Runner", "city": "Chicago"}
    with patch.object(client, "_make_request", return_value=_response(200, payload)):
        athlete = client.get_athlete()
    assert athlete.id == 7
    assert athlete.firstname == "Sam"


@pytest.mark.parametrize("status_code", [401, 404, 500])
def test_get_athlete_error_status(status_code):
    client = StravaClient(access_token="token")
    with patch.object(
        client, "_make_request", return_value=_response(status_code, {"message": "x"})
    ):
        with pytest.raises(StravaRequestError, match="Failed to fetch athlete data"):
            client.get_athlete()


def test_get_athlete_transport_error():
    client = StravaClient(access_token="token")
    with patch.object(
        client, "_make_request", side_effect=httpx.ConnectError("unreachable")
    ):
        with pytest.raises(StravaRequestError) as exc_info:
            client.get_athlete()
    # The user-facing message hides the cause, which is chained instead.
    assert str(exc_info.value) == "Failed to fetch athlete data"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_get_athlete_stats():
    client = StravaClient(access_token="token")
    payload = {
        "ytd_run_totals": {"count": 42, "distance": 321868.8, "moving_time": 100},
        "all_run_totals": {"count": 900, "distance": 1.0},
    }
    with patch.object(
        client, "_make_request", return_value=_response(200, payload)
    ) as mock_request:
        stats = client.get_athlete_stats(7)
    mock_request.assert_called_once_with(
        "GET", "https://www.strava.com/api/v3/athletes/7/stats"
    )
    assert stats.ytd_run_totals.count == 42
    assert stats.ytd_run_totals.distance == 321868.8


def test_get_athlete_stats_unexpected_payload():
    client = StravaClient(access_token="token")
    with patch.object(client, "_make_request", return_value=_response(200, {})):
        with pytest.raises(StravaRequestError, match="Failed to fetch stats"):
            client.get_athlete_stats(7)


def test_pagination_stops_on_short_page(strava_activity_payload_factory):
    client = StravaClient(access_token="token", per_page=3)
    pages = [
        _response(200, strava_activity_payload_factory.make_page(3, first_id=1)),
        _response(200, strava_activity_payload_factory.make_page(2, first_id=4)),
    ]
    with patch.object(client, "_make_request", side_effect=pages) as mock_request:
        activities = client.get_activities()

    assert [a.id for a in activities] == [1, 2, 3, 4, 5]
    assert mock_request.call_count == 2
    requested_pages = [c.kwargs["params"]["page"] for c in mock_request.call_args_list]
    assert requested_pages == [1, 2]


def test_pagination_stops_on_empty_page(strava_activity_payload_factory):
    client = StravaClient(access_token="token", per_page=2)
    pages = [
        _response(200, strava_activity_payload_factory.make_page(2, first_id=1)),
        _response(200, strava_activity_payload_factory.make_page(2, first_id=3)),
        _response(200, []),
    ]
    with patch.object(client, "_make_request", side_effect=pages) as mock_request:
        activities = client.get_activities()

    assert len(activities) == 4
    assert mock_request.call_count == 3


def test_pagination_keeps_pages_before_a_failed_page(strava_activity_payload_factory):
    client = StravaClient(access_token="token", per_page=2)
    pages = [
        _response(200, strava_activity_payload_factory.make_page(2, first_id=1)),
        _response(500, {"message": "Internal error"}),
    ]
    with patch.object(client, "_make_request", side_effect=pages):
        activities = client.get_activities()

    assert [a.id for a in activities] == [1, 2]


def test_pagination_keeps_pages_before_a_transport_error(
    strava_activity_payload_factory,
):
    client = StravaClient(access_token="token", per_page=2)
    pages = [
        _response(200, strava_activity_payload_factory.make_page(2, first_id=1)),
        httpx.ReadTimeout("too slow"),
    ]
    with patch.object(client, "_make_request", side_effect=pages):
        activities = client.get_activities()

    assert [a.id for a in activities] == [1, 2]


def test_first_page_failure_yields_no_activities():
    client = StravaClient(access_token="token")
    with patch.object(client, "_make_request", return_value=_response(429, {})):
        assert client.get_activities() == []


def test_get_activities_passes_time_window():
    client = StravaClient(access_token="token")
    after = datetime(2025, 1, 1, tzinfo=timezone.utc)
    before = datetime(2026, 1, 1, tzinfo=timezone.utc)
    with patch.object(
        client, "_make_request", return_value=_response(200, [])
    ) as mock_request:
        client.get_activities(after=after, before=before)

    args, kwargs = mock_request.call_args
    assert args == ("GET", ACTIVITIES_URL)
    assert kwargs["params"] == {
        "page": 1,
        "per_page": 200,
        "after": 1735689600,
        "before": 1767225600,
    }


def test_malformed_activities_are_skipped(strava_activity_payload_factory):
    client = StravaClient(access_token="token")
    page = [
        strava_activity_payload_factory.make({"id": 1}),
        strava_activity_payload_factory.make({"id": 2, "start_date": "not a date"}),
        strava_activity_payload_factory.make({"id": 3, "start_date": None}),
        strava_activity_payload_factory.make({"id": 4, "distance": -5}),
        strava_activity_payload_factory.make({"id": 5}),
    ]
    with patch.object(client, "_make_request", return_value=_response(200, page)):
        activities = client.get_activities()

    assert [a.id for a in activities] == [1, 5]
