"""
Formatting utilities for display.

Used by the CLI and any renderer that shows statistics.
"""
import math
from typing import Optional

from .units import UnitConverter

PLACEHOLDER = "—"


def format_duration(milliseconds: float) -> str:
    """
    Format a duration as 'Hh MMm SSs' or 'Mm SSs'.

    Args:
        milliseconds: Duration in milliseconds

    Returns:
        Formatted string (e.g., '2h 30m 45s', '15m 30s'), or '—' when the
        duration is not a positive finite number
    """
    if not math.isfinite(milliseconds) or milliseconds <= 0:
        return PLACEHOLDER

    total_seconds = int(milliseconds // 1000)
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    if hours > 0:
        return f"{hours}h {minutes:02d}m {seconds:02d}s"
    return f"{minutes}m {seconds:02d}s"


def format_distance(meters: float, converter: UnitConverter) -> str:
    """Format a distance, e.g. '12.50 km'."""
    return f"{converter.distance(meters):.2f} {converter.distance_label}"


def format_elevation(meters: float, converter: UnitConverter) -> str:
    """Format an elevation, e.g. '850 m'. Infinite values render as '—'."""
    if not math.isfinite(meters):
        return PLACEHOLDER
    return f"{converter.elevation(meters):.0f} {converter.elevation_label}"


def format_speed(meters_per_second: Optional[float], converter: UnitConverter) -> str:
    """Format a speed, e.g. '10.8 km/h'. None renders as '—'."""
    if meters_per_second is None:
        return PLACEHOLDER
    return f"{converter.speed(meters_per_second):.1f} {converter.speed_label}"
