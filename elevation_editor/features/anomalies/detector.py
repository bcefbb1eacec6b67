"""
Elevation Anomaly Detector

Finds regions of a track with unusually steep gradients or large elevation
jumps, which usually indicate GPS or barometer errors.
"""

import logging
from typing import List, Optional, Sequence

from elevation_editor.features.track.models import TrackPoint
from .models import AnomalyRegion

logger = logging.getLogger(__name__)

# Fewer points than this give no meaningful baseline gradient
MIN_POINTS = 10

# Anomaly gradient = max(average gradient * multiplier, floor)
GRADIENT_MULTIPLIER = 3.0
MIN_GRADIENT_THRESHOLD = 0.05   # 5% grade

# From this threshold (m) upward only absolute jumps count; the gradient
# test is switched off
GRADIENT_CHECK_MAX_THRESHOLD = 50.0

# Non-steep segments tolerated inside one region
MAX_GAP_SEGMENTS = 5

# Steep segments a region needs before it is reported
MIN_STEEP_SEGMENTS = 3

# Samples added on each side of a closed region
REGION_PADDING_POINTS = 1


def _segment_gradients(elevations: Sequence[float], distances: Sequence[float]) -> List[float]:
    """Absolute gradient (m/m) of each consecutive pair."""
    gradients = []
    for i in range(1, len(elevations)):
        ele_change = elevations[i] - elevations[i - 1]
        dist_change = (distances[i] - distances[i - 1]) or 1
        gradients.append(abs(ele_change / dist_change))
    return gradients


def detect_anomalies(points: Sequence[TrackPoint], threshold: float) -> List[AnomalyRegion]:
    """
    Detect elevation anomalies.

    Segment k joins points k and k+1. A segment is steep when its absolute
    elevation change reaches `threshold`, or, for thresholds below 50 m,
    when its gradient exceeds the anomaly gradient threshold. Steep
    segments separated by at most 5 non-steep ones form a region; regions
    with fewer than 3 steep segments are dropped.

    Args:
        points: Track points ordered by distance
        threshold: Minimum absolute elevation change (m) considered anomalous

    Returns:
        Regions in ascending distance order
    """
    n = len(points)
    if n < MIN_POINTS:
        logger.debug(f"Not enough points for anomaly detection: {n}")
        return []

    elevations = [p.ele for p in points]
    distances = [p.distance or 0.0 for p in points]

    gradients = _segment_gradients(elevations, distances)
    avg_gradient = sum(gradients) / len(gradients)
    gradient_threshold = max(avg_gradient * GRADIENT_MULTIPLIER, MIN_GRADIENT_THRESHOLD)
    check_gradient = threshold < GRADIENT_CHECK_MAX_THRESHOLD

    logger.debug(
        f"Average gradient: {avg_gradient * 100:.2f}%, "
        f"threshold: {gradient_threshold * 100:.2f}%, gradient check: {check_gradient}"
    )

    steep = [
        abs(elevations[k + 1] - elevations[k]) >= threshold
        or (check_gradient and gradients[k] > gradient_threshold)
        for k in range(n - 1)
    ]

    regions: List[AnomalyRegion] = []

    # Regions are tracked by the end point of each steep segment
    region_start: Optional[int] = None
    region_end = 0
    max_severity = 0.0
    steep_count = 0
    gap = 0

    def close_region() -> None:
        if steep_count < MIN_STEEP_SEGMENTS:
            return
        start = max(0, region_start - REGION_PADDING_POINTS)
        end = min(n - 1, region_end + REGION_PADDING_POINTS)
        if distances[end] <= distances[start]:
            logger.debug(f"Skipping zero-length region at points {start}-{end}")
            return
        region = AnomalyRegion(
            start_distance=distances[start],
            end_distance=distances[end],
            severity=max_severity,
        )
        logger.debug(
            f"Anomaly region: {region.start_distance / 1000:.2f}km - "
            f"{region.end_distance / 1000:.2f}km, severity: {region.severity:.2f}, "
            f"steep segments: {steep_count}"
        )
        regions.append(region)

    for k, is_steep in enumerate(steep):
        point = k + 1
        if is_steep:
            severity = gradients[k] / gradient_threshold
            if region_start is None:
                region_start = point
                max_severity = severity
                steep_count = 0
            else:
                max_severity = max(max_severity, severity)
            region_end = point
            steep_count += 1
            gap = 0
        elif region_start is not None:
            gap += 1
            if gap > MAX_GAP_SEGMENTS:
                close_region()
                region_start = None
                gap = 0

    if region_start is not None:
        close_region()

    logger.debug(f"Detected {len(regions)} anomaly regions in {n} points")
    return regions


class AnomalyDetector:
    """Anomaly detection with a configured default threshold."""

    def __init__(self, threshold: float):
        self.threshold = threshold

    def detect(
        self,
        points: Sequence[TrackPoint],
        threshold: Optional[float] = None
    ) -> List[AnomalyRegion]:
        """Detect anomalies, using the configured threshold unless one is given."""
        return detect_anomalies(points, self.threshold if threshold is None else threshold)
