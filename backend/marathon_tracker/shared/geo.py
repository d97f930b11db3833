"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def cumulative_distances(points: list[tuple[float, float]]) -> list[float]:
    """
    Distance from the first point to every point of a polyline.

    Args:
        points: List of (lat, lon) tuples

    Returns:
        List of the same length, starting with 0.0 (kilometers)
    """
    if not points:
        return []

    totals = [0.0]
    for i in range(1, len(points)):
        lat1, lon1 = points[i - 1]
        lat2, lon2 = points[i]
        totals.append(totals[-1] + haversine(lat1, lon1, lat2, lon2))

    return totals


def lerp_point(
    start: tuple[float, float],
    end: tuple[float, float],
    t: float
) -> tuple[float, float]:
    """Linear interpolation between two (lat, lon) points, t in [0, 1]."""
    return (
        start[0] + (end[0] - start[0]) * t,
        start[1] + (end[1] - start[1]) * t,
    )
