"""Unit conversions shared by the models and aggregations."""

METERS_PER_MILE_FACTOR = 0.000621371


def meters_to_miles(meters: float) -> float:
    """Convert a distance in meters (as Strava reports it) to miles."""
    return meters * METERS_PER_MILE_FACTOR
