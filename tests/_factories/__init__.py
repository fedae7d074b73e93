from .activity import ActivityFactory
from .strava import StravaActivityPayloadFactory

__all__ = [
    "ActivityFactory",
    "StravaActivityPayloadFactory",
]
