"""
Track statistics.

Usage:
    from elevation_editor.features.stats import calculate_stats, ElevationStats
"""

from .calculator import calculate_stats
from .schemas import ElevationStats

__all__ = [
    "calculate_stats",
    "ElevationStats",
]
