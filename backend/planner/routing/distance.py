"""Great-circle distance and rounding helpers."""

import math

from backend.planner.models.common import Coordinate

EARTH_RADIUS_KM = 6371


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in kilometers.

    Args:
        lat1, lng1: First point in decimal degrees
        lat2, lng2: Second point in decimal degrees

    Returns:
        Non-negative distance in km (0.0 for identical points)
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # Float error can push a just past 1 for near-antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance between two coordinates in kilometers."""
    return haversine_km(a.lat, a.lng, b.lat, b.lng)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (not banker's rounding)."""
    return math.floor(value + 0.5)
