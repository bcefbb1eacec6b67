"""
Clamping rules for the caller-supplied editing parameters.

Out-of-range values are clamped, never rejected.
"""

MAX_SMOOTHING_RADIUS = 200

# Radius may cover at most one eighth of the track
RADIUS_POINTS_DIVISOR = 8

MIN_ANOMALY_THRESHOLD = 1.0
MAX_ANOMALY_THRESHOLD = 100.0


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(value, upper))


def max_smoothing_radius(point_count: int) -> int:
    """Largest radius allowed for a track with point_count samples."""
    return max(0, min(point_count // RADIUS_POINTS_DIVISOR, MAX_SMOOTHING_RADIUS))


def clamp_radius(radius: float, point_count: int) -> int:
    """Round and clamp a smoothing radius to 0..max_smoothing_radius."""
    return int(clamp(round(radius), 0, max_smoothing_radius(point_count)))


def clamp_strength(strength: float) -> float:
    """Clamp a smoothing strength to 0..1."""
    return clamp(strength, 0.0, 1.0)


def clamp_threshold(threshold: float) -> float:
    """Clamp an anomaly threshold to 1..100 meters."""
    return clamp(threshold, MIN_ANOMALY_THRESHOLD, MAX_ANOMALY_THRESHOLD)
