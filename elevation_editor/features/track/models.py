"""
Track data model.

Track points are immutable: every edit produces a new sequence, which is
what lets history keep snapshots by reference.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class TrackPoint:
    """One GPS sample."""
    lat: float
    lon: float
    ele: float
    distance: float = 0.0           # Cumulative meters from track start
    time: Optional[str] = None      # ISO-8601, as found in the file
    index: int = 0                  # Position in the parsed file

    def with_elevation(self, ele: float) -> "TrackPoint":
        """Copy of this point with only the elevation changed."""
        return replace(self, ele=ele)


Points = Tuple[TrackPoint, ...]


@dataclass(frozen=True)
class Track:
    """A parsed track: its samples plus file-level totals."""
    points: Points
    total_distance: float
    name: Optional[str] = None
    elevation_gain: float = 0.0     # Raw, unsmoothed
    elevation_loss: float = 0.0
    source: Optional[str] = field(default=None, repr=False)  # Original GPX text

    @property
    def elevations(self) -> Sequence[float]:
        return [p.ele for p in self.points]

    def __len__(self) -> int:
        return len(self.points)
