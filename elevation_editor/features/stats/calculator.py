"""
Elevation Statistics Calculator

Derives elevation range, noise-filtered ascent/descent, moving duration and
speeds from a (possibly edited) track.
"""

import math
from typing import Optional, Sequence, Tuple

from elevation_editor.features.track.models import TrackPoint
from elevation_editor.shared.elevation import (
    ELEVATION_STEP_THRESHOLD,
    MEDIAN_WINDOW_SIZE,
    calculate_elevation_changes,
    rolling_median,
)
from elevation_editor.shared.timeutils import parse_timestamp
from .schemas import ElevationStats


def _duration_and_speeds(
    points: Sequence[TrackPoint]
) -> Tuple[float, Optional[float], Optional[float]]:
    """
    Sum elapsed time over pairs with valid timestamps.

    Pairs where either time is missing or unparsable, or where time does
    not advance, are skipped entirely (neither time nor distance counts).

    Returns:
        Tuple of (duration_seconds, average_speed, max_speed)
    """
    total_seconds = 0.0
    total_distance = 0.0
    max_speed = 0.0

    previous_time = parse_timestamp(points[0].time) if points else None
    for prev, point in zip(points, points[1:]):
        current_time = parse_timestamp(point.time)
        prev_time, previous_time = previous_time, current_time
        if prev_time is None or current_time is None:
            continue

        delta_seconds = (current_time - prev_time) / 1000
        if delta_seconds <= 0:
            continue

        delta_distance = max(0.0, point.distance - prev.distance)
        total_distance += delta_distance
        total_seconds += delta_seconds
        max_speed = max(max_speed, delta_distance / delta_seconds)

    average_speed = total_distance / total_seconds if total_seconds > 0 else None
    return total_seconds, average_speed, (max_speed if max_speed > 0 else None)


def calculate_stats(
    points: Sequence[TrackPoint],
    total_distance: float,
    edited_count: int = 0
) -> ElevationStats:
    """
    Calculate statistics for a track.

    Ascent and descent come from a 3-point rolling median of the
    elevations, counting only steps of at least 2.5 m.

    Args:
        points: Track points
        total_distance: Track length (m) as read from the file
        edited_count: Number of manually edited points

    Returns:
        ElevationStats; an empty track gives min=+inf, max=-inf and zeros
    """
    raw = [p.ele for p in points]
    smoothed = rolling_median(raw, MEDIAN_WINDOW_SIZE)
    ascent, descent = calculate_elevation_changes(smoothed, min_step=ELEVATION_STEP_THRESHOLD)
    duration_seconds, average_speed, max_speed = _duration_and_speeds(points)

    return ElevationStats(
        min_elevation=min(raw, default=math.inf),
        max_elevation=max(raw, default=-math.inf),
        total_ascent=ascent,
        total_descent=descent,
        total_distance=total_distance,
        edited_count=edited_count,
        total_duration_ms=duration_seconds * 1000,
        average_speed=average_speed,
        max_speed=max_speed,
    )
