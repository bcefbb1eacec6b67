"""
Smoothing transforms for point editing.

Both transforms are pure: they return a new tuple of points and never touch
the input. Only elevations change, and no elevation goes below zero.
"""

from typing import Sequence

from elevation_editor.features.track.models import Points, TrackPoint
from elevation_editor.shared.limits import clamp_strength


def _effective_radius(radius: float) -> int:
    return max(0, int(round(radius)))


def _distance_factor(offset: int, radius: int) -> float:
    """Linear falloff: 1 at the target, reaching 0 one step past the radius."""
    return max(0.0, 1 - offset / (radius + 1))


def _blend(current: float, target: float, influence: float) -> float:
    return max(0.0, current + (target - current) * influence)


def affected_indices(target_index: int, radius: float, length: int) -> range:
    """In-bounds indices touched by an edit at target_index."""
    r = _effective_radius(radius)
    if not 0 <= target_index < length:
        return range(0)
    return range(max(0, target_index - r), min(length, target_index + r + 1))


def smooth_drag(
    points: Sequence[TrackPoint],
    target_index: int,
    new_elevation: float,
    radius: float,
    strength: float
) -> Points:
    """
    Move one point to a new elevation and pull its neighbours along.

    Neighbours within `radius` blend toward the new elevation by
    strength * (1 - offset / (radius + 1)), starting from their values
    in `points`.

    Args:
        points: Source points (the drag-start snapshot)
        target_index: Index of the dragged point
        new_elevation: Requested elevation for the dragged point
        radius: Points affected on each side
        strength: Blend intensity, clamped to 0-1

    Returns:
        New points; an unchanged copy if target_index is out of range
    """
    result = list(points)
    if not 0 <= target_index < len(result):
        return tuple(result)

    r = _effective_radius(radius)
    s = clamp_strength(strength)
    target_ele = max(0.0, new_elevation)
    result[target_index] = points[target_index].with_elevation(target_ele)

    if r == 0 or s == 0:
        return tuple(result)

    for offset in range(1, r + 1):
        influence = s * _distance_factor(offset, r)
        if influence <= 0:
            continue

        for index in (target_index - offset, target_index + offset):
            if 0 <= index < len(points):
                blended = _blend(points[index].ele, target_ele, influence)
                result[index] = points[index].with_elevation(blended)

    return tuple(result)


def smooth_click(
    points: Sequence[TrackPoint],
    target_index: int,
    radius: float,
    strength: float
) -> Points:
    """
    Pull the points around target_index toward their mean elevation.

    The mean is taken over [target_index - radius, target_index + radius]
    clipped to the track; each point in that window blends toward it with
    the same falloff as smooth_drag. With radius 0 only the target moves,
    by `strength`.

    Returns:
        New points; an unchanged copy when strength is 0 or the index is
        out of range
    """
    result = list(points)
    s = clamp_strength(strength)
    if s == 0 or not 0 <= target_index < len(result):
        return tuple(result)

    r = _effective_radius(radius)
    window = affected_indices(target_index, r, len(result))
    average = sum(points[i].ele for i in window) / len(window)

    for index in window:
        distance = abs(index - target_index)
        if r == 0:
            influence = s if distance == 0 else 0.0
        else:
            influence = s * _distance_factor(distance, r)

        if influence <= 0:
            continue

        result[index] = points[index].with_elevation(
            _blend(points[index].ele, average, influence)
        )

    return tuple(result)
