"""
Anomaly data types.
"""

from dataclasses import dataclass
from typing import Tuple

AnomalyKey = Tuple[float, float]


@dataclass(frozen=True)
class AnomalyRegion:
    """
    A distance interval with an implausible elevation change.

    Regions are recomputed on every detection pass. Their identity is the
    (start_distance, end_distance) pair, never a position in a list.
    """
    start_distance: float   # meters
    end_distance: float     # meters
    severity: float         # peak gradient / anomaly gradient threshold

    @property
    def key(self) -> AnomalyKey:
        return (self.start_distance, self.end_distance)

    @property
    def length(self) -> float:
        return self.end_distance - self.start_distance

    def overlaps(self, lower: float, upper: float) -> bool:
        """True if any part of the region lies within [lower, upper]."""
        return self.end_distance >= lower and self.start_distance <= upper
