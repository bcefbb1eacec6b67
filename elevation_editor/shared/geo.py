"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
from typing import List, Sequence, Tuple

# Earth radius in meters
EARTH_RADIUS_M = 6371000.0


def haversine_m(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in meters
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

    return EARTH_RADIUS_M * c


def cumulative_distances(coords: Sequence[Tuple[float, float]]) -> List[float]:
    """
    Cumulative distance from the first coordinate, one value per coordinate.

    Args:
        coords: Sequence of (lat, lon) pairs

    Returns:
        Non-decreasing distances in meters (first value is 0)
    """
    distances: List[float] = []
    total = 0.0

    for i, (lat, lon) in enumerate(coords):
        if i > 0:
            prev_lat, prev_lon = coords[i - 1]
            total += haversine_m(prev_lat, prev_lon, lat, lon)
        distances.append(total)

    return distances
