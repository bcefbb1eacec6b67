"""
Statistics schemas.

Pydantic models handed to renderers and the CLI.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ElevationStats(BaseModel):
    """Derived, read-only statistics of a track."""

    model_config = ConfigDict(frozen=True)

    # Elevation (raw samples; +inf/-inf for an empty track)
    min_elevation: float
    max_elevation: float

    # Noise-filtered totals
    total_ascent: float = 0.0
    total_descent: float = 0.0

    total_distance: float = 0.0
    edited_count: int = 0

    # Time (only pairs with valid, increasing timestamps)
    total_duration_ms: float = 0.0
    average_speed: Optional[float] = None   # m/s
    max_speed: Optional[float] = None       # m/s

    @property
    def elevation_range(self) -> float:
        """max - min, or 0 for an empty track."""
        if self.max_elevation < self.min_elevation:
            return 0.0
        return self.max_elevation - self.min_elevation
