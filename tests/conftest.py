import os
import time

import httpx
import pytest

# Ensure allowed environment for env_loader
os.environ.setdefault("ENV", "dev")

from rundash.app import env_loader  # noqa: F401, E402

from tests._factories import ActivityFactory, StravaActivityPayloadFactory  # noqa: E402


class AccidentalNetworkAccessError(Exception):
    """Raised when a unit test accidentally tries to reach a real server."""

    pass


def _raise_network_access_error(*args, **kwargs):
    """Raise an error when a real HTTP request is attempted in unit tests."""
    raise AccidentalNetworkAccessError(
        "Unit test attempted a real HTTP request! "
        "Mock the Strava call with @patch('httpx.Client') or patch "
        "StravaClient._make_request, or mark the test as @pytest.mark.integration."
    )


@pytest.fixture(autouse=True)
def prevent_network_access_in_unit_tests(request, monkeypatch):
    """Prevent accidental calls to the Strava API in unit tests.

    This patches the real httpx transport, so FastAPI's TestClient (which uses
    its own in-process transport) keeps working.
    """
    markers = [marker.name for marker in request.node.iter_markers()]
    if "integration" in markers:
        yield
        return

    monkeypatch.setattr(
        httpx.HTTPTransport, "handle_request", _raise_network_access_error
    )
    yield


@pytest.fixture(autouse=True)
def local_timezone(monkeypatch):
    """Pin the process timezone to UTC so week bounds don't depend on the host.

    Yields a setter for tests that need another zone. POSIX TZ strings are
    used so no timezone database is needed.
    """

    def set_timezone(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    set_timezone("UTC0")
    yield set_timezone
    monkeypatch.undo()
    time.tzset()


@pytest.fixture(scope="session")
def activity_factory() -> ActivityFactory:
    return ActivityFactory()


@pytest.fixture(scope="session")
def strava_activity_payload_factory() -> StravaActivityPayloadFactory:
    return StravaActivityPayloadFactory()
